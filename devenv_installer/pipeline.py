from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

from .errors import ProvisioningError

if TYPE_CHECKING:
    from .context import ExecutionContext

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    START = "start"
    INTERPRETER_CHECKED = "interpreter_checked"
    ENV_READY = "env_ready"
    SOURCE_SYNCED = "source_synced"
    NATIVE_LIB_READY = "native_lib_ready"
    DEPS_SELECTED = "deps_selected"
    DEPS_INSTALLED = "deps_installed"
    APP_INSTALLED = "app_installed"
    UI_DECIDED = "ui_decided"
    DONE = "done"
    FAILED = "failed"


_ORDER = [s for s in PipelineState if s is not PipelineState.FAILED]


class Step(Protocol):
    """A single provisioning step.

    ``is_satisfied`` is the idempotency predicate: when it returns True the
    step's effect is already present (or must not be applied) and ``run`` is
    skipped. A step may also define ``after(ctx)``, called once the step is
    run or skipped, for effects that must hold either way. ``fatal`` decides
    whether a ProvisioningError halts the run.
    """

    step_id: str
    reaches: PipelineState
    fatal: bool

    def is_satisfied(self, ctx: "ExecutionContext") -> bool:
        ...

    def run(self, ctx: "ExecutionContext") -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: PipelineState
    ran_steps: List[str]
    skipped_steps: List[str]
    degraded_steps: List[str]
    failed_step: Optional[str] = None
    error: Optional[ProvisioningError] = None

    @property
    def ok(self) -> bool:
        return self.state is PipelineState.DONE


def _check_order(steps: Sequence[Step]) -> None:
    previous = PipelineState.START
    for step in steps:
        if step.reaches in (PipelineState.START, PipelineState.DONE, PipelineState.FAILED):
            raise ValueError(f"Step {step.step_id} cannot target {step.reaches.value}")
        if _ORDER.index(step.reaches) <= _ORDER.index(previous):
            raise ValueError(f"Step {step.step_id} ({step.reaches.value}) is out of order after {previous.value}")
        previous = step.reaches


def run_pipeline(ctx: "ExecutionContext", steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, halting on the first fatal failure."""

    _check_order(steps)

    ran: List[str] = []
    skipped: List[str] = []
    degraded: List[str] = []
    state = PipelineState.START

    for step in steps:
        ctx.current_step = step.step_id
        try:
            if step.is_satisfied(ctx):
                logger.info("Skipping step %s (already satisfied)", step.step_id)
                skipped.append(step.step_id)
            else:
                logger.info("Running step %s", step.step_id)
                step.run(ctx)
                ran.append(step.step_id)
            after = getattr(step, "after", None)
            if after is not None:
                after(ctx)
        except ProvisioningError as e:
            if step.fatal:
                ctx.logger.log(str(e), "ERROR")
                ctx.current_step = None
                return PipelineResult(
                    state=PipelineState.FAILED,
                    ran_steps=ran,
                    skipped_steps=skipped,
                    degraded_steps=degraded,
                    failed_step=step.step_id,
                    error=e,
                )
            ctx.logger.log(f"{e} Continuing.", "WARNING")
            degraded.append(step.step_id)

        state = step.reaches
        logger.debug("Reached %s", state.value)

    ctx.current_step = None
    return PipelineResult(
        state=PipelineState.DONE,
        ran_steps=ran,
        skipped_steps=skipped,
        degraded_steps=degraded,
    )
