from __future__ import annotations

from ..context import ExecutionContext
from ..errors import InterpreterNotFound
from ..lib.interpreter import InterpreterLocator
from ..pipeline import PipelineState


class LocateInterpreterStep:
    step_id = "10_locate_interpreter"
    reaches = PipelineState.INTERPRETER_CHECKED
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return False

    def run(self, ctx: ExecutionContext) -> None:
        cfg = ctx.config
        locator = InterpreterLocator(cfg.interpreters, min_version=cfg.min_python)
        found = locator.locate()
        if found is None:
            wanted = ".".join(str(p) for p in cfg.min_python)
            raise InterpreterNotFound(
                f"No suitable Python executable found. Please ensure that Python {wanted} "
                "or higher is installed and available in the system PATH."
            )
        ctx.interpreter = found
