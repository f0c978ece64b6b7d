from __future__ import annotations

import io
import os
import subprocess
from pathlib import Path
from types import SimpleNamespace
from typing import Callable, Iterable, Optional

import pytest

from devenv_installer.config import InstallerConfig
from devenv_installer.context import ExecutionContext
from devenv_installer.lib import command
from devenv_installer.lib.venv import activation_script, venv_python
from devenv_installer.logging_utils import SessionLogger


class FakeRunner:
    """Stands in for subprocess.run inside run_cmd.

    Rules match when their tokens appear contiguously in argv; the most
    recently added matching rule wins and unmatched commands succeed with
    no output.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self._rules: list[tuple[tuple[str, ...], int, str, Optional[Callable[[list[str]], None]]]] = []

    def on(
        self,
        *tokens: str,
        returncode: int = 0,
        stdout: str = "",
        effect: Optional[Callable[[list[str]], None]] = None,
    ) -> "FakeRunner":
        self._rules.append((tokens, returncode, stdout, effect))
        return self

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        for tokens, returncode, stdout, effect in reversed(self._rules):
            if _contains(argv, tokens):
                if effect is not None:
                    effect(argv)
                return subprocess.CompletedProcess(argv, returncode, stdout, "")
        return subprocess.CompletedProcess(argv, 0, "", "")

    def called(self, *tokens: str) -> list[list[str]]:
        return [c for c in self.calls if _contains(c, tokens)]


def _contains(argv: list[str], tokens: Iterable[str]) -> bool:
    tokens = list(tokens)
    n = len(tokens)
    return any(argv[i : i + n] == tokens for i in range(len(argv) - n + 1))


class ScriptedInput:
    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.asked = 0

    def __call__(self, _prompt: str) -> str:
        self.asked += 1
        if not self.answers:
            raise AssertionError("Unexpected prompt")
        return self.answers.pop(0)


def make_venv(venv_dir: Path) -> None:
    activation_script(venv_dir).parent.mkdir(parents=True, exist_ok=True)
    activation_script(venv_dir).write_text("# activate\n", encoding="utf-8")
    venv_python(venv_dir).write_text("", encoding="utf-8")


def make_native_lib(venv_dir: Path, module: str = "talib") -> None:
    if os.name == "nt":
        sp = venv_dir / "Lib" / "site-packages"
    else:
        sp = venv_dir / "lib" / "python3.12" / "site-packages"
    (sp / module).mkdir(parents=True, exist_ok=True)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr(command, "subprocess", SimpleNamespace(run=runner, PIPE=subprocess.PIPE))
    return runner


@pytest.fixture
def console() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def session(tmp_path: Path, console: io.StringIO):
    logger = SessionLogger(tmp_path / "logs" / "session.log", stream=console)
    yield logger
    logger.close()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    interp = tmp_path / "bin" / "python3.12"
    interp.parent.mkdir()
    interp.write_text("", encoding="utf-8")
    for name in ("requirements.txt", "requirements-dev.txt", "requirements-plot.txt"):
        (root / name).write_text("", encoding="utf-8")
    return root


@pytest.fixture
def interpreter_path(tmp_path: Path) -> str:
    return str(tmp_path / "bin" / "python3.12")


@pytest.fixture
def make_ctx(session: SessionLogger, project: Path, interpreter_path: str):
    def _make(*answers: str, raw: Optional[dict] = None, **kwargs) -> ExecutionContext:
        cfg_raw = {
            "interpreters": [interpreter_path],
            "manifests": ["requirements.txt", "requirements-dev.txt", "requirements-plot.txt"],
        }
        cfg_raw.update(raw or {})
        return ExecutionContext(
            config=InstallerConfig(raw=cfg_raw),
            logger=session,
            project_root=project,
            read_line=ScriptedInput(*answers),
            read_key=kwargs.pop("read_key", lambda: None),
            open_file=kwargs.pop("open_file", lambda _path: None),
            **kwargs,
        )

    return _make


@pytest.fixture
def standard_tools(fake_run: FakeRunner, project: Path) -> FakeRunner:
    """Healthy toolchain: interpreter reports 3.12, venv creation works, tree clean."""

    fake_run.on("--version", stdout="Python 3.12.1\n")
    fake_run.on("-m", "venv", effect=lambda argv: make_venv(Path(argv[-1])))
    fake_run.on("git", "status", "--porcelain", stdout="")
    return fake_run


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def existing_venv(project: Path) -> Path:
    venv_dir = project / ".venv"
    make_venv(venv_dir)
    return venv_dir


@pytest.fixture
def existing_native_lib(existing_venv: Path) -> Path:
    make_native_lib(existing_venv)
    return existing_venv
