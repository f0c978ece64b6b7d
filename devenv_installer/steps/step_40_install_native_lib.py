from __future__ import annotations

from ..context import ExecutionContext
from ..errors import NativeLibraryInstallFailed
from ..lib.pip import install_from_cache
from ..lib.venv import has_package
from ..pipeline import PipelineState


class InstallNativeLibStep:
    """Best-effort: the dependency install may pull the library in anyway."""

    step_id = "40_install_native_lib"
    reaches = PipelineState.NATIVE_LIB_READY
    fatal = False

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return has_package(ctx.venv_dir, ctx.config.native_module)

    def run(self, ctx: ExecutionContext) -> None:
        cfg = ctx.config
        ctx.logger.log(f"Installing {cfg.native_package} using the virtual environment's pip...")
        r = install_from_cache(
            ctx.venv_python,
            cfg.native_package,
            ctx.project_root / cfg.native_cache_dir,
            env=ctx.env,
        )
        if r.returncode != 0:
            raise NativeLibraryInstallFailed(f"Failed to install {cfg.native_package}.")
