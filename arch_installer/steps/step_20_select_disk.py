from __future__ import annotations

import logging

from ..context import InstallContext

logger = logging.getLogger(__name__)


class SelectDiskStep:
    step_id = "20_select_disk"
    description = "Choose the installation disk"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        ctx.prompts.say("Listing available disks...")
        r = ctx.run(["fdisk", "-l"])
        if r.stdout:
            ctx.prompts.say(r.stdout.rstrip())

        ctx.values["disk"] = ctx.prompts.collect_validated_device(
            "Enter the disk to partition (e.g., /dev/sda)", "disk"
        )
