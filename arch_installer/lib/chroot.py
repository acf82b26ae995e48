from __future__ import annotations

from typing import Sequence

CHROOT_TOOL = "arch-chroot"


def chroot_argv(target_root: str, argv: Sequence[str]) -> list[str]:
    """Wrap argv so that it runs inside target root."""

    return [CHROOT_TOOL, target_root, *argv]
