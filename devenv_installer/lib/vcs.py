from __future__ import annotations

import logging
from typing import Literal, Mapping, Optional

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)

WorktreeState = Literal["clean", "dirty", "unavailable"]


def worktree_state(cwd: str, *, env: Optional[Mapping[str, str]] = None) -> WorktreeState:
    """Classify the checkout at cwd.

    "unavailable" covers a missing git binary and directories that are not
    a git checkout.
    """

    try:
        r = run_cmd(["git", "status", "--porcelain"], cwd=cwd, env=env)
    except OSError as e:
        logger.debug("git unavailable: %s", e)
        return "unavailable"
    if r.returncode != 0:
        return "unavailable"
    return "dirty" if r.stdout.strip() else "clean"


def pull(
    cwd: str,
    *,
    remote: Optional[str] = None,
    branch: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CmdResult:
    argv = ["git", "pull"]
    if remote:
        argv.append(remote)
        if branch:
            argv.append(branch)
    return run_cmd(argv, cwd=cwd, env=env)
