from __future__ import annotations

import logging

from ..context import InstallContext

logger = logging.getLogger(__name__)

# subvolume -> mountpoint below the target root
SUBVOLUMES = [("@", ""), ("@home", "/home")]


class MountFilesystemsStep:
    step_id = "50_mount"
    description = "Create Btrfs subvolumes and mount the target tree"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        target = ctx.target_root
        root_part = ctx.values["root_partition"]

        ctx.prompts.say("Mounting root partition...")
        ctx.run(["mount", root_part, target])

        ctx.prompts.say("Creating Btrfs subvolumes (@ and @home)...")
        for name, _ in SUBVOLUMES:
            ctx.run(["btrfs", "subvolume", "create", f"{target}/{name}"])

        ctx.prompts.say("Remounting subvolumes...")
        ctx.run(["umount", target])
        for name, mountpoint in SUBVOLUMES:
            dst = f"{target}{mountpoint}"
            if mountpoint:
                ctx.run(["mkdir", "-p", dst])
            ctx.run(["mount", "-o", f"subvol={name}", root_part, dst])

        ctx.prompts.say("Mounting EFI partition...")
        ctx.run(["mount", "--mkdir", ctx.values["efi_partition"], f"{target}/boot"])

        ctx.prompts.say("Enabling swap...")
        ctx.run(["swapon", ctx.values["swap_partition"]])

        logger.info("Target tree mounted at %s", target)
