from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .context import InstallContext
from .errors import OperatorAbort, StepFailure

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single installation step."""

    step_id: str
    description: str
    irreversible: bool

    def run(self, ctx: InstallContext) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    failed_step: Optional[str] = None
    error: Optional[StepFailure] = None

    @property
    def ok(self) -> bool:
        return self.failed_step is None


@dataclass
class CommandStep:
    """One external command. `check=False` tolerates a non-zero exit."""

    step_id: str
    description: str
    argv: List[str]
    check: bool = True
    interactive: bool = False
    irreversible: bool = False
    env: dict = field(default_factory=dict)

    def run(self, ctx: InstallContext) -> None:
        r = ctx.run(self.argv, check=self.check, interactive=self.interactive, env=self.env or None)
        if r.returncode != 0:
            logger.warning("%s exited with %d (ignored)", self.step_id, r.returncode)


def _confirm_irreversible(ctx: InstallContext, step: Step) -> None:
    pending = getattr(step, "pending_actions", None)
    lines = [f"About to run: {step.description}"]
    if pending is not None:
        lines += [f"  -> {a}" for a in pending(ctx)]
    lines.append("This cannot be undone.")
    ctx.prompts.say("\n".join(lines))

    if not ctx.prompts.confirm(f"Proceed with '{step.step_id}'?"):
        raise OperatorAbort(f"Operator declined {step.step_id}")


def run_pipeline(*, ctx: InstallContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order; stop at the first failing step.

    Already-applied steps are never rolled back: after a destructive step has
    started, the failure is handed to the operator instead.
    """

    ran: List[str] = []

    for step in steps:
        if getattr(step, "irreversible", False):
            _confirm_irreversible(ctx, step)

        logger.info("Running step %s: %s", step.step_id, step.description)
        try:
            step.run(ctx)
        except StepFailure as e:
            if e.step_id is None:
                e.step_id = step.step_id
            logger.error("Step %s failed: %s", step.step_id, e)
            if e.output:
                logger.error("Output of %s:\n%s", step.step_id, e.output)
            return PipelineResult(ran_steps=ran, failed_step=step.step_id, error=e)
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran)
