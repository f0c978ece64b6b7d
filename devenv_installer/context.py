from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .config import InstallerConfig
from .lib.console import open_in_viewer, read_keypress
from .lib.venv import activation_env, venv_python
from .logging_utils import SessionLogger
from .prompt import InputPort, SelectionPrompt


@dataclass
class ExecutionContext:
    """Run-scoped state threaded through every step.

    Owned by a single pipeline invocation. The I/O ports default to the real
    terminal and are replaced with scripted callables in tests.
    """

    config: InstallerConfig
    logger: SessionLogger
    project_root: Path
    read_line: InputPort = input
    read_key: Callable[[], None] = read_keypress
    open_file: Callable[[str], None] = open_in_viewer

    interpreter: Optional[str] = None
    selected_manifests: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)
    current_step: Optional[str] = None

    @property
    def venv_dir(self) -> Path:
        return self.project_root / self.config.venv_dir

    @property
    def venv_python(self) -> Path:
        return venv_python(self.venv_dir)

    @property
    def log_path(self) -> Path:
        return self.logger.log_path

    @property
    def cwd(self) -> str:
        return str(self.project_root)

    @property
    def prompt(self) -> SelectionPrompt:
        return SelectionPrompt(self.logger, self.read_line)

    @property
    def active(self) -> bool:
        return "VIRTUAL_ENV" in self.env

    def activate(self) -> None:
        self.env = activation_env(self.venv_dir)

    def deactivate(self) -> None:
        self.env = {}
