from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    interactive: bool = False,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command, never its stdin.
    - Captures stdout/stderr unless `interactive`, in which case the child
      inherits the controlling terminal (editors, cfdisk, pacstrap progress).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    try:
        if interactive:
            p = subprocess.run(
                argv_list,
                cwd=cwd,
                env=dict(os.environ, **(env or {})),
            )
            returncode, stdout, stderr = p.returncode, "", ""
        else:
            p = subprocess.run(
                argv_list,
                input=input_text,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=cwd,
                env=dict(os.environ, **(env or {})),
            )
            returncode, stdout, stderr = p.returncode, p.stdout or "", p.stderr or ""
    except OSError as e:
        # Same status a shell reports for a command it cannot run.
        returncode, stdout, stderr = 127, "", str(e)

    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    result = CmdResult(argv=argv_list, returncode=returncode, stdout=stdout, stderr=stderr)

    if check and returncode != 0:
        raise CommandError(f"Command failed ({returncode}): {fmt_argv(argv_list)}", result=result)

    return result
