from __future__ import annotations

from typing import Optional


class InstallerError(RuntimeError):
    """Base class for every failure that ends the installer run."""


class ValidationError(InstallerError):
    """Operator input was rejected; handled inside the prompt loops."""


class PreconditionError(InstallerError):
    pass


class OperatorAbort(InstallerError):
    pass


class StepFailure(InstallerError):
    """A step could not complete.

    `output` holds whatever the failing tool printed, so it can be shown to
    the operator before exiting.
    """

    def __init__(self, message: str, *, step_id: Optional[str] = None, output: str = "") -> None:
        super().__init__(message)
        self.step_id = step_id
        self.output = output


class CommandError(StepFailure):
    def __init__(self, message: str, *, result, step_id: Optional[str] = None) -> None:
        output = "\n".join(s.strip() for s in (result.stdout, result.stderr) if s and s.strip())
        super().__init__(message, step_id=step_id, output=output)
        self.result = result
