from __future__ import annotations

import logging

from ..context import InstallContext

logger = logging.getLogger(__name__)


class InstallBaseStep:
    step_id = "60_base_install"
    description = "Install the base system with pacstrap"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        packages = ctx.config.packages
        ctx.prompts.say("Installing base system packages...")
        ctx.run(["pacstrap", "-K", ctx.target_root, *packages], interactive=True)
        logger.info("Base system installed (%d packages)", len(packages))
