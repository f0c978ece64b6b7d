from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from .config import find_config, load_config
from .context import ExecutionContext
from .exit_handler import finish
from .lib.console import open_in_viewer, read_keypress
from .logging_utils import SessionLogger
from .pipeline import run_pipeline
from .prompt import InputPort
from .steps import (
    CreateVenvStep,
    InstallApplicationStep,
    InstallDependenciesStep,
    InstallNativeLibStep,
    InstallUiStep,
    LocateInterpreterStep,
    SelectDependenciesStep,
    SyncSourceStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        LocateInterpreterStep(),
        CreateVenvStep(),
        SyncSourceStep(),
        InstallNativeLibStep(),
        SelectDependenciesStep(),
        InstallDependenciesStep(),
        InstallApplicationStep(),
        InstallUiStep(),
    ]


def run(
    *,
    project_root: Optional[Path] = None,
    read_line: InputPort = input,
    read_key: Callable[[], None] = read_keypress,
    open_file: Callable[[str], None] = open_in_viewer,
    wait_for_keypress: Optional[bool] = None,
) -> int:
    """Provision the environment for the project at project_root (default: cwd)."""

    root = (project_root or Path.cwd()).resolve()
    cfg_path = find_config(root)
    cfg = load_config(str(cfg_path) if cfg_path else None)

    session = SessionLogger.for_session(cfg.log_dir)
    ctx = ExecutionContext(
        config=cfg,
        logger=session,
        project_root=root,
        read_line=read_line,
        read_key=read_key,
        open_file=open_file,
    )
    wait = cfg.wait_for_keypress if wait_for_keypress is None else wait_for_keypress

    try:
        session.log("Starting the operations...")
        session.log(f"Current directory: {root}")
        session.log(f"Log file: {session.log_path}")
        if cfg_path:
            session.log(f"Using configuration from {cfg_path}")

        try:
            result = run_pipeline(ctx, build_steps())
        except (EOFError, KeyboardInterrupt):
            session.log(f"Input aborted during step {ctx.current_step}.", "ERROR")
            return finish(ctx, 1, wait)
        except Exception:
            logger.exception("Installer failed during step %s", ctx.current_step)
            ctx.deactivate()
            raise

        if result.ok:
            session.log("Update complete!")
            return finish(ctx, 0, wait)
        return finish(ctx, 1, wait)
    finally:
        session.close()


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="devenv-installer",
        description="Create or update the project's virtual environment interactively.",
    )
    p.parse_args(argv)
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
