from __future__ import annotations

import logging
from pathlib import Path

from ..context import InstallContext
from ..errors import StepFailure

logger = logging.getLogger(__name__)


class GenerateFstabStep:
    step_id = "70_fstab"
    description = "Generate /etc/fstab and have the operator verify it"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        target = ctx.target_root
        fstab_path = Path(target) / "etc/fstab"

        ctx.prompts.say("Generating fstab...")
        r = ctx.run(["genfstab", "-U", target])
        ctx.write_file(str(fstab_path), r.stdout, append=True)

        ctx.prompts.say("Displaying fstab for verification...")
        if ctx.dry_run:
            contents = r.stdout
        else:
            try:
                contents = fstab_path.read_text(encoding="utf-8")
            except OSError as e:
                raise StepFailure(f"Could not read {fstab_path}: {e}") from e
        ctx.prompts.say(contents.rstrip())
        ctx.prompts.pause("Please verify the fstab output. Press any key to continue...")
