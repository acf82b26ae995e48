from __future__ import annotations

import logging

from ..context import InstallContext

logger = logging.getLogger(__name__)

PARTITION_PROMPTS = [
    ("efi_partition", "Enter the EFI partition (e.g., /dev/sda1)", "EFI partition"),
    ("swap_partition", "Enter the swap partition (e.g., /dev/sda2)", "swap partition"),
    ("root_partition", "Enter the root partition (e.g., /dev/sda3)", "root partition"),
]


class AssignPartitionsStep:
    step_id = "35_assign_partitions"
    description = "Assign EFI, swap and root partitions"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        for key, prompt, description in PARTITION_PROMPTS:
            ctx.values[key] = ctx.prompts.collect_validated_device(prompt, description)
