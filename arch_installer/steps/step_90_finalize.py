from __future__ import annotations

import logging

from ..context import InstallContext

logger = logging.getLogger(__name__)


class UnmountStep:
    step_id = "90_unmount"
    description = "Unmount the target tree"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        ctx.prompts.say("Unmounting filesystems...")
        ctx.run(["umount", "-R", ctx.target_root])


class RebootStep:
    step_id = "95_reboot"
    description = "Reboot into the installed system"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        ctx.prompts.say("Rebooting system...")
        ctx.prompts.pause("Please remove the installation media after shutdown. Press any key to reboot...")
        ctx.run(["reboot"])
