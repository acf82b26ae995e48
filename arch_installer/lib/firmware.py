from __future__ import annotations

from pathlib import Path
from typing import Optional

from .env import PATHS


def detect_firmware(efi_sysfs: str = PATHS.efi_sysfs) -> str:
    """Detect firmware type for the *currently running* environment.

    Returns: 'efi' or 'bios'.
    """

    if Path(efi_sysfs).is_dir():
        return "efi"
    return "bios"


def efi_platform_size(efi_sysfs: str = PATHS.efi_sysfs) -> Optional[str]:
    """Return the UEFI platform size in bits (64 or 32), if the kernel exposes it."""

    try:
        size = (Path(efi_sysfs) / "fw_platform_size").read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return size or None
