from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .lib.env import PATHS

DEFAULT_PACKAGES = [
    "base",
    "linux",
    "linux-firmware",
    "grub",
    "efibootmgr",
    "nano",
    "networkmanager",
    "sudo",
]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _as_bool(value: Any, *, key: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def target_root(self) -> str:
        return str(self.raw.get("target_root") or PATHS.target_root)

    @property
    def keymap(self) -> str:
        return str(self.raw.get("keymap") or "pt-latin9")

    @property
    def timezone(self) -> str:
        return str(self.raw.get("timezone") or "Europe/Lisbon")

    @property
    def locale_lang(self) -> str:
        return str(((self.raw.get("locale") or {}).get("lang")) or "pt_PT.UTF-8")

    @property
    def locale_messages(self) -> str:
        return str(((self.raw.get("locale") or {}).get("messages")) or "en_US.UTF-8")

    @property
    def network_host(self) -> str:
        return str(((self.raw.get("network") or {}).get("host")) or "archlinux.org")

    @property
    def network_attempts(self) -> int:
        value = (self.raw.get("network") or {}).get("attempts")
        if value is None:
            return 5
        try:
            attempts = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"network.attempts must be an integer, got {value!r}") from None
        if attempts < 1:
            raise ValueError(f"network.attempts must be at least 1, got {attempts}")
        return attempts

    @property
    def packages(self) -> List[str]:
        return [str(p) for p in (self.raw.get("packages") or DEFAULT_PACKAGES)]

    @property
    def editor(self) -> str:
        return str(self.raw.get("editor") or "nano")

    @property
    def bootloader_id(self) -> str:
        return str(self.raw.get("bootloader_id") or "GRUB")

    @property
    def partition_editor(self) -> str:
        return str(self.raw.get("partition_editor") or "cfdisk")

    @property
    def strict_partition_editor(self) -> bool:
        return _as_bool(self.raw.get("strict_partition_editor"), key="strict_partition_editor", default=False)


def load_config(path: Optional[str] = None) -> InstallerConfig:
    """Load the installer config.

    Without an explicit path the default location is optional and the
    built-in defaults apply when it is absent.
    """

    if path is None:
        p = Path(PATHS.config_default)
        if not p.exists():
            return InstallerConfig()
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("installer config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML is required to read the installer config") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{p}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{p} must contain a mapping/object")

    cfg = InstallerConfig(raw=raw)
    # Bad values fail here, before any step has touched a disk.
    _ = (cfg.network_attempts, cfg.strict_partition_editor)
    return cfg
