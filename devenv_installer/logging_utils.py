from __future__ import annotations

import logging
import os
import sys
import tempfile
import time
from pathlib import Path
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "devenv_installer"

# Operator-facing questions sit between INFO and WARNING.
PROMPT = 25
logging.addLevelName(PROMPT, "PROMPT")

_LEVELS = {
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "PROMPT": PROMPT,
}

_CONSOLE_FORMATS = {
    logging.WARNING: "WARNING: %(message)s",
    logging.ERROR: "ERROR: %(message)s",
    PROMPT: ">> %(message)s",
}


class ConsoleFormatter(logging.Formatter):
    """Render records with a per-level prefix (INFO stays plain)."""

    def __init__(self) -> None:
        super().__init__(fmt="%(message)s")
        self._by_level = {lvl: logging.Formatter(fmt) for lvl, fmt in _CONSOLE_FORMATS.items()}

    def format(self, record: logging.LogRecord) -> str:
        fmt = self._by_level.get(record.levelno)
        if fmt is None:
            return super().format(record)
        return fmt.format(record)


def session_log_path(
    log_dir: Optional[str] = None,
    started_at: Optional[float] = None,
) -> Path:
    """Build the log file path for a run.

    The pid suffix keeps two runs started within the same second apart.
    """

    base = Path(log_dir) if log_dir else Path(tempfile.gettempdir())
    stamp = time.strftime("%Y%m%d_%H%M%S", time.localtime(started_at))
    return base / f"devenv-installer_{stamp}_{os.getpid()}.log"


def resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        if level not in _LEVELS.values() and level != logging.DEBUG:
            raise ValueError(f"Unsupported log level: {level}")
        return level
    try:
        return _LEVELS[str(level).upper()]
    except KeyError:
        raise ValueError(f"Unsupported log level: {level}") from None


class SessionLogger:
    """Run-scoped log sink.

    Every record lands in one append-only file as ``LEVEL: message`` and is
    mirrored to the console. The file is opened lazily on the first write.
    Module loggers under ``devenv_installer`` share the same handlers, so
    command output captured at DEBUG ends up in the file as well.
    """

    def __init__(
        self,
        log_path: Union[str, Path],
        *,
        stream: Optional[TextIO] = None,
        logger_name: str = PACKAGE_LOGGER,
    ) -> None:
        self.log_path = Path(log_path)
        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(self.log_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt="%(levelname)s: %(message)s"))

        console = logging.StreamHandler(stream if stream is not None else sys.stdout)
        console.setLevel(logging.INFO)
        console.setFormatter(ConsoleFormatter())

        self._handlers: list[logging.Handler] = [file_handler, console]
        for h in self._handlers:
            self._logger.addHandler(h)

    @classmethod
    def for_session(
        cls,
        log_dir: Optional[str] = None,
        *,
        stream: Optional[TextIO] = None,
    ) -> "SessionLogger":
        return cls(session_log_path(log_dir), stream=stream)

    def log(self, message: str, level: Union[str, int] = "INFO") -> None:
        self._logger.log(resolve_level(level), message)

    def close(self) -> None:
        for h in self._handlers:
            self._logger.removeHandler(h)
            h.close()
        self._handlers = []
