from __future__ import annotations

from ..context import ExecutionContext
from ..errors import EnvironmentCreationFailed
from ..lib.venv import activation_script, create_venv, ensure_pip
from ..pipeline import PipelineState


class CreateVenvStep:
    step_id = "20_create_venv"
    reaches = PipelineState.ENV_READY
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return activation_script(ctx.venv_dir).exists()

    def run(self, ctx: ExecutionContext) -> None:
        if not ctx.interpreter:
            raise EnvironmentCreationFailed("No interpreter resolved; cannot create the virtual environment.")

        ctx.logger.log(f"Virtual environment not found. Creating it at {ctx.venv_dir}...")
        create_venv(ctx.interpreter, ctx.venv_dir, cwd=ctx.cwd)
        if not activation_script(ctx.venv_dir).exists():
            raise EnvironmentCreationFailed(f"Failed to create virtual environment at {ctx.venv_dir}.")
        ctx.logger.log("Virtual environment created successfully.")

        r = ensure_pip(ctx.venv_dir)
        if r.returncode != 0:
            ctx.logger.log("ensurepip did not complete; relying on the pip already in the environment.", "WARNING")

    def after(self, ctx: ExecutionContext) -> None:
        """Activate the environment, whether it was just created or already there."""
        if not ctx.venv_python.exists():
            raise EnvironmentCreationFailed(
                f"Failed to activate virtual environment: {ctx.venv_python} is missing."
            )
        ctx.activate()
        ctx.logger.log(f"Virtual environment is activated at: {ctx.venv_dir}")
