from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from devenv_installer.lib import interpreter
from devenv_installer.lib.interpreter import InterpreterLocator, candidate_interpreters, parse_version


def test_windows_candidates_are_ordered_bare_versioned_absolute() -> None:
    c = candidate_interpreters(user="alice", system="Windows")

    assert c[:2] == ["python", "python3"]
    assert c[2:6] == ["python3.13", "python3.12", "python3.11", "python3.10"]
    assert c[6] == r"C:\Users\alice\AppData\Local\Programs\Python\Python313\python.exe"
    assert c.index(r"C:\Python313\python.exe") > c.index(
        r"C:\Users\alice\AppData\Local\Programs\Python\Python310\python.exe"
    )


def test_posix_candidates_put_newest_absolute_first() -> None:
    c = candidate_interpreters(user="alice", system="Linux")

    installs = c[6:]
    assert installs[0].endswith("/.local/bin/python3.13")
    assert installs[-1] == "/usr/bin/python3.10"
    assert installs.index("/usr/local/bin/python3.12") > installs.index("/usr/bin/python3.13")


def test_parse_version() -> None:
    assert parse_version("Python 3.12.1\n") == (3, 12, 1)
    assert parse_version("Python was not found; run without arguments to install") is None


def test_locate_accepts_first_working_candidate(fake_run, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        interpreter,
        "shutil",
        SimpleNamespace(which=lambda name: None if name == "python" else f"/usr/bin/{name}"),
    )
    fake_run.on("--version", stdout="Python 3.12.1")
    fake_run.on("/usr/bin/python3", "--version", returncode=9009)
    fake_run.on("/usr/bin/python3.13", "--version", stdout="Python 3.13.0")

    found = InterpreterLocator(["python", "python3", "python3.13", "python3.12"]).locate()

    assert found == "/usr/bin/python3.13"
    assert [c[0] for c in fake_run.calls] == ["/usr/bin/python3", "/usr/bin/python3.13"]


def test_locate_skips_too_old_and_unparseable(fake_run, tmp_path: Path) -> None:
    old = tmp_path / "python3.8"
    odd = tmp_path / "python-odd"
    for p in (old, odd):
        p.write_text("", encoding="utf-8")
    fake_run.on(str(old), "--version", stdout="Python 3.8.10")
    fake_run.on(str(odd), "--version", stdout="no version here")

    locator = InterpreterLocator([str(old), str(odd), str(tmp_path / "missing")], min_version=(3, 10))

    assert locator.locate() is None
    assert len(fake_run.calls) == 2


def test_locate_survives_version_check_os_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    exe = tmp_path / "python3"
    exe.write_text("", encoding="utf-8")

    def boom(*_args, **_kwargs):
        raise PermissionError("not executable")

    monkeypatch.setattr(interpreter, "run_cmd", boom)

    assert InterpreterLocator([str(exe)]).locate() is None
