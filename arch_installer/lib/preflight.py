from __future__ import annotations

import logging
import os

from ..errors import PreconditionError
from .env import PATHS
from .firmware import detect_firmware, efi_platform_size
from .net import probe_host

logger = logging.getLogger(__name__)


def check_root() -> None:
    if os.geteuid() != 0:
        raise PreconditionError("This script must be run as root. Please use sudo or switch to root.")
    logger.info("Running as root")


def check_network(host: str, attempts: int = 5, *, dry_run: bool = False) -> None:
    if not probe_host(host, attempts=attempts, dry_run=dry_run):
        raise PreconditionError("No internet connection. Please configure your network and try again.")
    logger.info("Internet connection is active")


def check_firmware_mode(efi_sysfs: str = PATHS.efi_sysfs) -> str:
    """Require UEFI; returns the platform size in bits, or 'unknown'."""

    if detect_firmware(efi_sysfs) != "efi":
        raise PreconditionError("BIOS mode detected. This installer assumes UEFI.")
    size = efi_platform_size(efi_sysfs) or "unknown"
    logger.info("UEFI mode detected (platform size: %s bits)", size)
    return size
