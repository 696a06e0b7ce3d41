"""Project scaffolding: clone the template and rename it after the project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import ProjectConfig, ScaffoldSettings
from .errors import PreconditionError
from .plan import build_plan
from .retrieval import TemplateSource, build_source, strip_metadata
from .rewrite import rename_matching_files, rename_path, replace_token, rewrite_tree

__all__ = ["ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a project from the template.

    The run is a fixed sequence: check the target does not exist, fetch the
    template, rename the placeholder include folder, rename the placeholder
    test files and finally rewrite every file with the substitution plan.
    Nothing is rolled back when a step fails; the partially rewritten target
    is left on disk.
    """

    source: TemplateSource
    settings: ScaffoldSettings = field(default_factory=ScaffoldSettings)
    progress: ProgressCallback | None = None

    @classmethod
    def from_settings(
        cls,
        settings: ScaffoldSettings,
        progress: ProgressCallback | None = None,
    ) -> "ProjectScaffolder":
        return cls(source=build_source(settings), settings=settings, progress=progress)

    def _report(self, message: str) -> None:
        LOGGER.info(message)
        if self.progress is not None:
            self.progress(message)

    def create(self, name: str | ProjectConfig, directory: str | Path | None = None) -> Path:
        """Scaffold ``name`` inside ``directory`` and return the project path."""

        if isinstance(name, ProjectConfig):
            config = name
        else:
            try:
                config = ProjectConfig.from_name(name, directory)
            except ValueError as exc:
                raise PreconditionError(str(exc)) from exc

        target = config.target
        if target.exists():
            raise PreconditionError(f"Folder '{config.identifier}' already exists")

        placeholder = self.settings.placeholder

        self._report("Cloning template...")
        self.source.fetch(target)
        strip_metadata(target)

        self._report("Renaming app include folder...")
        include_dir = Path(self.settings.include_dir)
        rename_path(target, include_dir / placeholder, include_dir / config.slug)

        self._report("Renaming test files...")
        predicate, rename = replace_token(f"test_{placeholder}", f"test_{config.slug}")
        rename_matching_files(target / self.settings.tests_dir, predicate, rename)

        self._report("Rewriting symbols...")
        plan = build_plan(config.identifier, config.slug, placeholder=placeholder)
        changed = rewrite_tree(target, plan)
        LOGGER.info("Rewrote %d files under %s", len(changed), target)

        return target
