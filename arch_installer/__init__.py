"""Interactive Arch Linux installer (UEFI + Btrfs).

Core design goals:
- Validate every operator-supplied path before touching a disk
- Explicit confirmation before irreversible steps
- Fail fast: the first failing step ends the run
- Centralized logging, with secrets kept out of it
"""

__all__ = []
