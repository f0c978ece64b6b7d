from __future__ import annotations

from pathlib import Path

from devenv_installer.exit_handler import finish


def test_failure_offers_log_and_opens_it(make_ctx) -> None:
    opened: list[str] = []
    ctx = make_ctx("y", open_file=opened.append)
    ctx.env = {"VIRTUAL_ENV": "x"}

    assert finish(ctx, 1) == 1

    assert opened == [str(ctx.log_path)]
    assert ctx.env == {}


def test_failure_declined_does_not_open(make_ctx) -> None:
    opened: list[str] = []
    ctx = make_ctx("n", open_file=opened.append)

    assert finish(ctx, 1) == 1
    assert opened == []


def test_viewer_error_is_reported_not_raised(make_ctx, console) -> None:
    def broken(_path: str) -> None:
        raise OSError("no viewer")

    ctx = make_ctx("Y", open_file=broken)

    assert finish(ctx, 1) == 1
    assert "Could not open the log file" in console.getvalue()


def test_success_waits_for_keypress(make_ctx) -> None:
    pressed: list[bool] = []
    ctx = make_ctx(read_key=lambda: pressed.append(True))

    assert finish(ctx, 0, wait_for_keypress=True) == 0
    assert pressed == [True]


def test_success_without_wait_returns_immediately(make_ctx) -> None:
    pressed: list[bool] = []
    ctx = make_ctx(read_key=lambda: pressed.append(True))

    assert finish(ctx, 0, wait_for_keypress=False) == 0
    assert pressed == []
    assert isinstance(ctx.log_path, Path)


def test_closed_input_declines_log(make_ctx) -> None:
    def closed(_prompt: str) -> str:
        raise EOFError

    opened: list[str] = []
    ctx = make_ctx(open_file=opened.append)
    ctx.read_line = closed

    assert finish(ctx, 1) == 1
    assert opened == []
