from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Sequence

from .command import CmdResult, run_cmd


def _pip(python: Path) -> list[str]:
    return [str(python), "-m", "pip", "install"]


def install_from_cache(
    python: Path,
    package: str,
    cache_dir: Path,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> CmdResult:
    """Install from a local wheel cache, preferring prebuilt binaries."""
    return run_cmd(
        [*_pip(python), f"--find-links={cache_dir}", "--prefer-binary", package],
        env=env,
    )


def install_requirements(
    python: Path,
    manifests: Sequence[str],
    *,
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CmdResult:
    argv = _pip(python)
    for m in manifests:
        argv += ["-r", m]
    return run_cmd(argv, cwd=cwd, env=env)


def install_editable(
    python: Path,
    path: str = ".",
    *,
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CmdResult:
    return run_cmd([*_pip(python), "-e", path], cwd=cwd, env=env)
