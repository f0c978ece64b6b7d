from __future__ import annotations

from .context import ExecutionContext


def finish(ctx: ExecutionContext, exit_code: int, wait_for_keypress: bool = True) -> int:
    """Single exit path for a run; returns the process exit code."""

    ctx.deactivate()

    if exit_code != 0:
        try:
            wants_log = ctx.prompt.confirm("Script failed. Would you like to open the log file? (Y/N)")
        except EOFError:
            # Input is closed; nobody is there to answer.
            wants_log = False
        if wants_log:
            try:
                ctx.open_file(str(ctx.log_path))
            except OSError as e:
                ctx.logger.log(f"Could not open the log file ({e}). It is at: {ctx.log_path}", "WARNING")
    elif wait_for_keypress:
        ctx.logger.log("Press any key to exit...")
        ctx.read_key()

    return exit_code
