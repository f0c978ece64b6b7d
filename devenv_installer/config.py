from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

CONFIG_ENV_VAR = "DEVENV_INSTALLER_CONFIG"
DEFAULT_CONFIG_NAME = "devenv-installer.yaml"

DEFAULT_MANIFESTS = [
    "requirements.txt",
    "requirements-dev.txt",
    "requirements-hyperopt.txt",
    "requirements-freqai.txt",
    "requirements-freqai-rl.txt",
    "requirements-plot.txt",
]

# Single-letter option addressing stops at Z.
MAX_OPTIONS = 26


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key) or {}
    return value if isinstance(value, dict) else {}


def _str_list(value: Any, key: str) -> List[str]:
    # A bare YAML scalar would otherwise be iterated character by character.
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list, got {type(value).__name__}")
    return [str(v) for v in value]


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def venv_dir(self) -> str:
        return str(self.raw.get("venv_dir") or ".venv")

    @property
    def log_dir(self) -> Optional[str]:
        value = self.raw.get("log_dir")
        return str(value) if value else None

    @property
    def wait_for_keypress(self) -> bool:
        return bool(self.raw.get("wait_for_keypress", True))

    @property
    def min_python(self) -> Tuple[int, ...]:
        value = self.raw.get("min_python") or "3.10"
        if not isinstance(value, str):
            # YAML reads an unquoted 3.10 as the float 3.1.
            raise ValueError("min_python must be a quoted string such as '3.10'")
        return tuple(int(part) for part in value.split("."))

    @property
    def interpreters(self) -> Optional[List[str]]:
        """Explicit candidate list; None means the platform defaults."""
        value = self.raw.get("interpreters")
        if not value:
            return None
        return _str_list(value, "interpreters")

    @property
    def sync_source(self) -> bool:
        return bool(_section(self.raw, "source").get("sync", True))

    @property
    def git_remote(self) -> Optional[str]:
        value = _section(self.raw, "source").get("remote")
        return str(value) if value else None

    @property
    def git_branch(self) -> Optional[str]:
        value = _section(self.raw, "source").get("branch")
        return str(value) if value else None

    @property
    def native_package(self) -> str:
        return str(_section(self.raw, "native_library").get("package") or "TA-Lib")

    @property
    def native_module(self) -> str:
        return str(_section(self.raw, "native_library").get("module") or "talib")

    @property
    def native_cache_dir(self) -> str:
        return str(_section(self.raw, "native_library").get("cache_dir") or "build_helpers")

    @property
    def manifests(self) -> List[str]:
        return _str_list(self.raw.get("manifests") or DEFAULT_MANIFESTS, "manifests")

    @property
    def app_module(self) -> str:
        return str(_section(self.raw, "app").get("module") or "freqtrade")

    @property
    def ui_install_args(self) -> List[str]:
        args = _section(self.raw, "app").get("ui_install_args") or ["install-ui"]
        return _str_list(args, "ui_install_args")


def find_config(project_root: Path) -> Optional[Path]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = project_root / DEFAULT_CONFIG_NAME
    return candidate if candidate.exists() else None


def load_config(path: Optional[str] = None) -> InstallerConfig:
    """Load the YAML config; no path means built-in defaults."""

    if path is None:
        return InstallerConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("installer config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p.name} must contain a mapping/object")

    cfg = InstallerConfig(raw=raw)
    if not 1 <= len(cfg.manifests) <= MAX_OPTIONS:
        raise ValueError(f"manifests must list between 1 and {MAX_OPTIONS} files")
    # Each raises on a malformed value.
    cfg.min_python
    cfg.interpreters
    cfg.ui_install_args
    return cfg
