from __future__ import annotations

import getpass
import logging
import os
import platform
import re
import shutil
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .command import run_cmd

logger = logging.getLogger(__name__)

# Newest first.
SUPPORTED_MINORS = (13, 12, 11, 10)

_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)")


def parse_version(output: str) -> Optional[Tuple[int, int, int]]:
    m = _VERSION_RE.search(output)
    if not m:
        return None
    return (int(m.group(1)), int(m.group(2)), int(m.group(3)))


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def candidate_interpreters(
    *,
    user: Optional[str] = None,
    system: Optional[str] = None,
) -> List[str]:
    """Ordered candidate list: bare names, versioned names, then absolute installs."""

    system = system or platform.system()
    user = user or _current_user()

    names = ["python", "python3"] + [f"python3.{m}" for m in SUPPORTED_MINORS]

    if system == "Windows":
        paths = [
            rf"C:\Users\{user}\AppData\Local\Programs\Python\Python3{m}\python.exe"
            for m in SUPPORTED_MINORS
        ]
        paths += [rf"C:\Python3{m}\python.exe" for m in SUPPORTED_MINORS]
        return names + paths

    home = os.path.expanduser(f"~{user}")
    paths = []
    for m in SUPPORTED_MINORS:
        for base in (f"{home}/.local/bin", "/usr/local/bin", "/opt/homebrew/bin", "/usr/bin"):
            paths.append(f"{base}/python3.{m}")
    return names + paths


def _resolve(candidate: str) -> Optional[str]:
    if os.path.isabs(candidate) or os.sep in candidate:
        return candidate if Path(candidate).is_file() else None
    return shutil.which(candidate)


class InterpreterLocator:
    """Discovery only: never installs anything, never retries a candidate."""

    def __init__(
        self,
        candidates: Optional[Sequence[str]] = None,
        min_version: Tuple[int, ...] = (3, 10),
    ) -> None:
        self.candidates = list(candidates) if candidates is not None else candidate_interpreters()
        self.min_version = tuple(min_version)

    def query_version(self, executable: str) -> Optional[Tuple[int, int, int]]:
        try:
            r = run_cmd([executable, "--version"])
        except OSError as e:
            logger.debug("Version check failed for %s: %s", executable, e)
            return None
        if r.returncode != 0:
            return None
        # Older interpreters print the version on stderr.
        return parse_version(r.stdout) or parse_version(r.stderr)

    def locate(self) -> Optional[str]:
        for candidate in self.candidates:
            resolved = _resolve(candidate)
            if resolved is None:
                continue
            version = self.query_version(resolved)
            if version is None:
                continue
            if version < self.min_version:
                logger.info("Ignoring %s (Python %s is too old)", resolved, ".".join(map(str, version)))
                continue
            logger.info("Using Python %s at %s", ".".join(map(str, version)), resolved)
            return resolved
        return None
