from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    target_root: str = "/mnt"
    config_default: str = "/etc/arch-installer.yaml"
    log_default: str = "/var/log/arch-installer.log"
    efi_sysfs: str = "/sys/firmware/efi"


PATHS = Paths()
