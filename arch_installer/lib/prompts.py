from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import questionary

from ..errors import OperatorAbort, PreconditionError, ValidationError

logger = logging.getLogger(__name__)


class Secret:
    """A confirmed secret value that never shows up in reprs or logs."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = value

    def reveal(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return "Secret('********')"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)


def is_block_device(path: str) -> bool:
    try:
        return Path(path).is_block_device()
    except OSError:
        return False


def _answer(question: Any) -> Any:
    # questionary returns None when the prompt is interrupted (Ctrl-C / EOF).
    response = question.ask()
    if response is None:
        raise OperatorAbort("Prompt cancelled by operator")
    return response


def _require_non_empty(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError("Input cannot be empty. Please try again.")
    return value


def _require_matching(first: str, second: str) -> Secret:
    if first != second:
        raise ValidationError("Passwords do not match. Please try again.")
    if not first:
        raise ValidationError("Password cannot be empty. Please try again.")
    return Secret(first)


class InputCollector:
    """Terminal prompts with validation.

    Each execution context (live environment, chroot) owns its own instance;
    nothing is shared between them.
    """

    def __init__(self, *, name: str = "live") -> None:
        self.name = name

    def say(self, text: str) -> None:
        questionary.print(text)

    def collect_field(self, prompt: str) -> str:
        while True:
            try:
                return _require_non_empty(_answer(questionary.text(f"{prompt}:")))
            except ValidationError as e:
                self.say(str(e))

    def collect_secret(self, prompt: str) -> Secret:
        while True:
            first = _answer(questionary.password(f"{prompt}:"))
            second = _answer(questionary.password(f"Confirm {prompt}:"))
            try:
                return _require_matching(first, second)
            except ValidationError as e:
                self.say(str(e))

    def collect_validated_device(self, prompt: str, description: str) -> str:
        """Ask for a device path and abort the run unless it is a block device.

        Device enumeration mistakes are operator errors, not transient ones,
        so there is no retry here.
        """

        path = self.collect_field(prompt)
        if not is_block_device(path):
            raise PreconditionError(
                f"Invalid {description}: {path} does not exist. "
                "Please check using 'fdisk -l' or 'lsblk'."
            )
        logger.info("Selected %s: %s", description, path)
        return path

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return bool(_answer(questionary.confirm(message, default=default, auto_enter=False)))

    def pause(self, message: Optional[str] = None) -> None:
        # A key press resolves to None here, so only an interrupt means abort.
        try:
            questionary.press_any_key_to_continue(message).unsafe_ask()
        except KeyboardInterrupt as e:
            raise OperatorAbort("Prompt cancelled by operator") from e
