from __future__ import annotations

import logging
from typing import List

from ..context import InstallContext
from ..lib.command import fmt_argv

logger = logging.getLogger(__name__)


def format_commands(ctx: InstallContext) -> List[List[str]]:
    v = ctx.values
    return [
        ["mkfs.fat", "-F", "32", v["efi_partition"]],
        ["mkswap", v["swap_partition"]],
        ["mkfs.btrfs", v["root_partition"]],
    ]


class FormatPartitionsStep:
    step_id = "40_format"
    description = "Create filesystems on the EFI, swap and root partitions"
    irreversible = True

    def pending_actions(self, ctx: InstallContext) -> List[str]:
        return [fmt_argv(argv) for argv in format_commands(ctx)]

    def run(self, ctx: InstallContext) -> None:
        ctx.prompts.say("Formatting partitions...")
        for argv in format_commands(ctx):
            ctx.run(argv)
        v = ctx.values
        logger.info("Formatted efi=%s swap=%s root=%s", v["efi_partition"], v["swap_partition"], v["root_partition"])
