from __future__ import annotations

from collections import defaultdict, deque
from typing import Any, Dict, List, Optional

import pytest

from arch_installer.config import InstallerConfig
from arch_installer.context import InstallContext
from arch_installer.errors import CommandError
from arch_installer.lib import prompts as prompts_mod
from arch_installer.lib.command import CmdResult, fmt_argv
from arch_installer.lib.prompts import InputCollector


class FakeQuestion:
    def __init__(self, answer: Any) -> None:
        self.answer = answer

    def ask(self) -> Any:
        return self.answer

    def unsafe_ask(self) -> Any:
        if isinstance(self.answer, BaseException):
            raise self.answer
        return self.answer


class ScriptedTerminal:
    """Stands in for questionary: answers come from a queue, output is kept."""

    def __init__(self) -> None:
        self.answers: deque = deque()
        self.asked: List[tuple] = []
        self.printed: List[str] = []
        self.pauses: List[Optional[str]] = []
        self.interrupt_pause = False

    def feed(self, *answers: Any) -> None:
        self.answers.extend(answers)

    def _question(self, kind: str, message: str) -> FakeQuestion:
        self.asked.append((kind, message))
        if not self.answers:
            raise AssertionError(f"unexpected {kind} prompt: {message}")
        return FakeQuestion(self.answers.popleft())

    def text(self, message: str, **kwargs: Any) -> FakeQuestion:
        return self._question("text", message)

    def password(self, message: str, **kwargs: Any) -> FakeQuestion:
        return self._question("password", message)

    def confirm(self, message: str, **kwargs: Any) -> FakeQuestion:
        return self._question("confirm", message)

    def press_any_key_to_continue(self, message: Optional[str] = None, **kwargs: Any) -> FakeQuestion:
        self.pauses.append(message)
        return FakeQuestion(KeyboardInterrupt() if self.interrupt_pause else None)

    def print(self, text: str, **kwargs: Any) -> None:
        self.printed.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.printed)


class CommandRecorder:
    """Replaces run_cmd; records argv and stdin, never runs anything."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.inputs: List[Optional[str]] = []
        self.stdout: Dict[str, str] = {}
        self.returncodes: Dict[str, deque] = defaultdict(deque)
        self.fail_on: set = set()

    @staticmethod
    def tool(argv: List[str]) -> str:
        return argv[2] if argv[0] == "arch-chroot" else argv[0]

    def script(self, tool: str, codes: List[int]) -> None:
        self.returncodes[tool].extend(codes)

    def __call__(
        self,
        argv,
        *,
        check: bool = True,
        env=None,
        cwd=None,
        input_text: Optional[str] = None,
        interactive: bool = False,
        dry_run: bool = False,
    ) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        self.inputs.append(input_text)

        tool = self.tool(argv)
        if self.returncodes[tool]:
            rc = self.returncodes[tool].popleft()
        else:
            rc = 1 if tool in self.fail_on else 0
        result = CmdResult(
            argv=argv,
            returncode=rc,
            stdout=self.stdout.get(tool, ""),
            stderr=f"{tool}: failed" if rc else "",
        )
        if check and rc != 0:
            raise CommandError(f"Command failed ({rc}): {fmt_argv(argv)}", result=result)
        return result

    def tools(self) -> List[str]:
        return [self.tool(c) for c in self.calls]


@pytest.fixture
def terminal(monkeypatch) -> ScriptedTerminal:
    term = ScriptedTerminal()
    q = prompts_mod.questionary
    for name in ("text", "password", "confirm", "press_any_key_to_continue", "print"):
        monkeypatch.setattr(q, name, getattr(term, name))
    return term


@pytest.fixture
def commands(monkeypatch) -> CommandRecorder:
    rec = CommandRecorder()
    monkeypatch.setattr("arch_installer.context.run_cmd", rec)
    monkeypatch.setattr("arch_installer.lib.net.run_cmd", rec)
    return rec


@pytest.fixture
def target_root(tmp_path) -> str:
    root = tmp_path / "mnt"
    root.mkdir()
    return str(root)


@pytest.fixture
def ctx(terminal, commands, target_root) -> InstallContext:
    return InstallContext(
        config=InstallerConfig(raw={"target_root": target_root}),
        prompts=InputCollector(),
    )
