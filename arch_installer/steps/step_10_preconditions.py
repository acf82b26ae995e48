from __future__ import annotations

import logging

from ..context import InstallContext
from ..lib.preflight import check_firmware_mode, check_network, check_root

logger = logging.getLogger(__name__)


class PreconditionsStep:
    step_id = "10_preconditions"
    description = "Check privileges, network and firmware mode"
    irreversible = False

    def run(self, ctx: InstallContext) -> None:
        cfg = ctx.config

        check_root()

        ctx.prompts.say(f"Setting keyboard layout to {cfg.keymap}...")
        ctx.run(["loadkeys", cfg.keymap])

        ctx.prompts.say("Verifying internet connection...")
        check_network(cfg.network_host, cfg.network_attempts, dry_run=ctx.dry_run)

        ctx.prompts.say("Checking for UEFI mode...")
        size = check_firmware_mode()
        ctx.prompts.say(f"UEFI mode detected (platform size: {size} bits).")

        ctx.prompts.say("Synchronizing system clock...")
        r = ctx.run(["timedatectl"])
        if r.stdout:
            ctx.prompts.say(r.stdout.rstrip())
