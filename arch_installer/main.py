from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import InstallerConfig, load_config
from .context import InstallContext
from .errors import InstallerError
from .lib.prompts import InputCollector
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, Step, run_pipeline
from .steps import (
    AssignPartitionsStep,
    ChrootConfigureStep,
    FormatPartitionsStep,
    GenerateFstabStep,
    InstallBaseStep,
    MountFilesystemsStep,
    PartitionDiskStep,
    PreconditionsStep,
    RebootStep,
    SelectDiskStep,
    UnmountStep,
)

logger = logging.getLogger(__name__)


def build_steps() -> list[Step]:
    return [
        PreconditionsStep(),
        SelectDiskStep(),
        PartitionDiskStep(),
        AssignPartitionsStep(),
        FormatPartitionsStep(),
        MountFilesystemsStep(),
        InstallBaseStep(),
        GenerateFstabStep(),
        ChrootConfigureStep(),
        UnmountStep(),
        RebootStep(),
    ]


def run(
    *,
    config: InstallerConfig,
    prompts: Optional[InputCollector] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """Run the full installation once, from preconditions to reboot."""

    ctx = InstallContext(config=config, prompts=prompts or InputCollector(), dry_run=dry_run)
    ctx.prompts.say("Starting Arch Linux installation...")
    return run_pipeline(ctx=ctx, steps=build_steps())


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="arch-installer")
    p.add_argument("--config", default=None, help="Path to installer config (yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")
    p.add_argument("--dry-run", action="store_true", help="Log commands instead of running them")

    args = p.parse_args(argv)

    actual_log_path = configure_logging(log_path=args.log)
    prompts = InputCollector()

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error("Unable to load config %s: %s", args.config, e)
        prompts.say(f"Unable to load config: {e}")
        return 1

    try:
        result = run(config=config, prompts=prompts, dry_run=bool(args.dry_run))
    except InstallerError as e:
        logger.error("Installer aborted: %s", e)
        prompts.say(str(e))
        return 1

    if not result.ok:
        err = result.error
        prompts.say(f"Step '{result.failed_step}' failed: {err}")
        if err is not None and err.output:
            prompts.say(err.output)
        prompts.say(f"See {actual_log_path} for details. Nothing was rolled back.")
        return 1

    logger.info("Installation finished (%s)", ", ".join(result.ran_steps))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
