from __future__ import annotations

import os
import platform
import sys

from .command import run_cmd


def read_keypress() -> None:
    """Block until the operator presses a key."""

    if os.name == "nt":
        import msvcrt

        msvcrt.getch()
        return

    if not sys.stdin.isatty():
        sys.stdin.readline()
        return

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def open_in_viewer(path: str) -> None:
    """Open a file with the desktop's default viewer."""

    if os.name == "nt":
        os.startfile(path)  # type: ignore[attr-defined]
        return

    opener = "open" if platform.system() == "Darwin" else "xdg-open"
    r = run_cmd([opener, path])
    if r.returncode != 0:
        raise OSError(f"{opener} exited with {r.returncode}")
