from __future__ import annotations

from ..context import ExecutionContext
from ..errors import InvalidSelection, UiInstallFailed
from ..lib.command import run_cmd
from ..pipeline import PipelineState

YES, NO = 0, 1


class InstallUiStep:
    step_id = "80_install_ui"
    reaches = PipelineState.UI_DECIDED
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return False

    def run(self, ctx: ExecutionContext) -> None:
        choice = ctx.prompt.select(
            "Do you want to install the UI?",
            ["Yes", "No"],
            default_choice="B",
            allow_multiple=False,
        )
        if choice == YES:
            cfg = ctx.config
            ctx.logger.log("Installing UI...")
            r = run_cmd(
                [str(ctx.venv_python), "-m", cfg.app_module, *cfg.ui_install_args],
                cwd=ctx.cwd,
                env=ctx.env,
            )
            if r.returncode != 0:
                raise UiInstallFailed("Failed to install UI.")
        elif choice == NO:
            ctx.logger.log("Skipping UI installation.")
        else:
            # Exclusive-select only yields an index in range or None; anything
            # else here is still treated as a failed selection.
            raise InvalidSelection("Invalid input for UI installation. Please enter 'A' or 'B'.")
