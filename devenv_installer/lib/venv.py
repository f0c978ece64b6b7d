from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from .command import CmdResult, run_cmd


def _is_windows() -> bool:
    return os.name == "nt"


def bin_dir(venv_dir: Path) -> Path:
    return venv_dir / ("Scripts" if _is_windows() else "bin")


def activation_script(venv_dir: Path) -> Path:
    """The file whose presence means the environment exists."""
    if _is_windows():
        return bin_dir(venv_dir) / "Activate.ps1"
    return bin_dir(venv_dir) / "activate"


def venv_python(venv_dir: Path) -> Path:
    if _is_windows():
        return bin_dir(venv_dir) / "python.exe"
    return bin_dir(venv_dir) / "python"


def site_packages_dirs(venv_dir: Path) -> List[Path]:
    if _is_windows():
        candidates = [venv_dir / "Lib" / "site-packages"]
    else:
        candidates = sorted(venv_dir.glob("lib/python*/site-packages"))
    return [p for p in candidates if p.is_dir()]


def has_package(venv_dir: Path, module: str) -> bool:
    return any((sp / module).is_dir() for sp in site_packages_dirs(venv_dir))


def activation_env(venv_dir: Path) -> Dict[str, str]:
    """Environment overlay equivalent to sourcing the activation script."""
    path = os.environ.get("PATH", "")
    return {
        "VIRTUAL_ENV": str(venv_dir),
        "PATH": str(bin_dir(venv_dir)) + (os.pathsep + path if path else ""),
    }


def create_venv(interpreter: str, venv_dir: Path, *, cwd: Optional[str] = None) -> CmdResult:
    return run_cmd([interpreter, "-m", "venv", str(venv_dir)], cwd=cwd)


def ensure_pip(venv_dir: Path, *, env: Optional[Mapping[str, str]] = None) -> CmdResult:
    return run_cmd([str(venv_python(venv_dir)), "-m", "ensurepip", "--default-pip"], env=env)
