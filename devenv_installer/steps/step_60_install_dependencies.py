from __future__ import annotations

from ..context import ExecutionContext
from ..errors import DependencyInstallFailed
from ..lib.pip import install_requirements
from ..pipeline import PipelineState


class InstallDependenciesStep:
    step_id = "60_install_dependencies"
    reaches = PipelineState.DEPS_INSTALLED
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return False

    def run(self, ctx: ExecutionContext) -> None:
        ctx.logger.log(f"Installing requirements from: {', '.join(ctx.selected_manifests)}")
        r = install_requirements(ctx.venv_python, ctx.selected_manifests, cwd=ctx.cwd, env=ctx.env)
        if r.returncode != 0:
            raise DependencyInstallFailed("Failed to install requirements.")
