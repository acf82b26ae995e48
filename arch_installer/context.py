from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from .config import InstallerConfig
from .lib.chroot import chroot_argv
from .lib.command import CmdResult, run_cmd
from .lib.prompts import InputCollector

logger = logging.getLogger(__name__)


@dataclass
class InstallContext:
    """Everything a step needs: config, prompts, and where commands run.

    With `exec_root` set, commands are executed inside that root through the
    chroot tool and file paths resolve below it.
    """

    config: InstallerConfig
    prompts: InputCollector
    dry_run: bool = False
    exec_root: Optional[str] = None
    values: Dict[str, Any] = field(default_factory=dict)

    @property
    def target_root(self) -> str:
        return self.config.target_root

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        env: Mapping[str, str] | None = None,
        input_text: str | None = None,
        interactive: bool = False,
    ) -> CmdResult:
        if self.exec_root:
            argv = chroot_argv(self.exec_root, argv)
        return run_cmd(
            argv,
            check=check,
            env=env,
            input_text=input_text,
            interactive=interactive,
            dry_run=self.dry_run,
        )

    def path(self, rel: str) -> Path:
        return Path(self.exec_root or "/") / rel.lstrip("/")

    def write_file(self, rel: str, contents: str, *, append: bool = False) -> None:
        p = self.path(rel)
        if self.dry_run:
            logger.info("Would write %s", str(p))
            return
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("a" if append else "w", encoding="utf-8") as f:
            f.write(contents)
        logger.info("Wrote %s", str(p))

    def nested(self, *, exec_root: str, prompts: InputCollector) -> "InstallContext":
        """A context for a second execution root with its own prompts."""

        return InstallContext(
            config=self.config,
            prompts=prompts,
            dry_run=self.dry_run,
            exec_root=exec_root,
        )
