from __future__ import annotations

from ..context import ExecutionContext
from ..errors import InvalidSelection, ManifestNotFound
from ..pipeline import PipelineState


class SelectDependenciesStep:
    step_id = "50_select_dependencies"
    reaches = PipelineState.DEPS_SELECTED
    fatal = True

    def is_satisfied(self, ctx: ExecutionContext) -> bool:
        return False

    def run(self, ctx: ExecutionContext) -> None:
        manifests = ctx.config.manifests
        indices = ctx.prompt.select(
            "Select which requirement files to install:",
            manifests,
            default_choice="A",
            allow_multiple=True,
        )
        if indices is None:
            raise InvalidSelection("Invalid requirement file selection.")

        selected = []
        for index in indices:
            rel = manifests[index]
            if not (ctx.project_root / rel).is_file():
                raise ManifestNotFound(f"Requirement file not found: {rel}")
            selected.append(rel)
        ctx.selected_manifests = selected
