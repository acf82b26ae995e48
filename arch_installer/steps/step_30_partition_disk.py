from __future__ import annotations

import logging
from typing import List

from ..context import InstallContext
from ..errors import StepFailure

logger = logging.getLogger(__name__)

LAYOUT_HINT = """Please create at least three partitions:
- EFI partition (~512M)
- Swap partition (~4G recommended)
- Root partition (remaining space)"""


class PartitionDiskStep:
    step_id = "30_partition_disk"
    description = "Partition the selected disk interactively"
    irreversible = True

    def pending_actions(self, ctx: InstallContext) -> List[str]:
        return [f"{ctx.config.partition_editor} {ctx.values['disk']}"]

    def run(self, ctx: InstallContext) -> None:
        disk = ctx.values["disk"]
        editor = ctx.config.partition_editor

        ctx.prompts.say(LAYOUT_HINT)
        ctx.prompts.pause(f"Press any key to launch {editor}...")

        # The editor's exit status is not trusted to mean much (quitting
        # without writing is a normal exit); only strict mode enforces it.
        r = ctx.run([editor, disk], check=False, interactive=True)
        if r.returncode != 0:
            logger.warning("%s exited with status %d", editor, r.returncode)
            if ctx.config.strict_partition_editor:
                raise StepFailure(f"{editor} exited with status {r.returncode}")

        ctx.prompts.say("Listing partitions...")
        r = ctx.run(["lsblk", disk])
        if r.stdout:
            ctx.prompts.say(r.stdout.rstrip())
