from __future__ import annotations

from ..context import ExecutionContext
from ..errors import ApplicationInstallFailed
from ..lib.pip import install_editable
from ..pipeline import PipelineState


class InstallApplicationStep:
    step_id = "70_install_application"
    reaches = PipelineState.APP_INSTALLED
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return False

    def run(self, ctx: ExecutionContext) -> None:
        app = ctx.config.app_module
        ctx.logger.log(f"Installing {app} from setup...")
        r = install_editable(ctx.venv_python, ".", cwd=ctx.cwd, env=ctx.env)
        if r.returncode != 0:
            raise ApplicationInstallFailed(f"Failed to install {app}.")
