from __future__ import annotations

from ..context import ExecutionContext
from ..errors import SyncFailed
from ..lib.vcs import pull, worktree_state
from ..pipeline import PipelineState


class SyncSourceStep:
    step_id = "30_sync_source"
    reaches = PipelineState.SOURCE_SYNCED
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        if not ctx.config.sync_source:
            ctx.logger.log("Source sync disabled in configuration.")
            return True

        ctx.logger.log("Checking if the repository is clean...")
        state = worktree_state(ctx.cwd, env=ctx.env)
        if state == "dirty":
            # Never overwrite uncommitted local work.
            ctx.logger.log("Changes in local git repository. Skipping git pull.")
            return True
        if state == "unavailable":
            ctx.logger.log("Not a git checkout (or git is not installed). Skipping git pull.", "WARNING")
            return True
        return False

    def run(self, ctx: ExecutionContext) -> None:
        ctx.logger.log("Pulling latest updates...")
        r = pull(ctx.cwd, remote=ctx.config.git_remote, branch=ctx.config.git_branch, env=ctx.env)
        if r.returncode != 0:
            raise SyncFailed("Failed to pull updates from Git.")
