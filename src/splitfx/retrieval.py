"""Template retrieval: materialise the template tree at a destination."""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from .config import ScaffoldSettings
from .errors import RetrievalError

__all__ = [
    "DirectoryTemplateSource",
    "GitTemplateSource",
    "TemplateSource",
    "build_source",
    "strip_metadata",
]


LOGGER = logging.getLogger(__name__)

METADATA_DIRS = (".git",)


class TemplateSource(ABC):
    """Producer of a fresh template tree."""

    @abstractmethod
    def fetch(self, destination: Path) -> None:
        """Materialise the full template at ``destination``."""


class GitTemplateSource(TemplateSource):
    """Shallow clone of a git repository."""

    def __init__(self, repository: str, *, depth: int = 1, executable: str = "git") -> None:
        self.repository = repository
        self.depth = depth
        self.executable = executable

    def command(self, destination: Path) -> list[str]:
        return [
            self.executable,
            "clone",
            f"--depth={self.depth}",
            self.repository,
            str(destination),
        ]

    def fetch(self, destination: Path) -> None:
        argv = self.command(destination)
        LOGGER.info("Running %s", " ".join(argv))
        try:
            completed = subprocess.run(argv, check=False)
        except FileNotFoundError as exc:
            raise RetrievalError(f"'{self.executable}' executable not found") from exc

        if completed.returncode != 0:
            raise RetrievalError(
                f"git clone of {self.repository} failed ({completed.returncode})"
            )


class DirectoryTemplateSource(TemplateSource):
    """Copy of a template checked out on the local filesystem."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def fetch(self, destination: Path) -> None:
        if not self.directory.is_dir():
            raise RetrievalError(f"template directory {self.directory} does not exist")

        LOGGER.info("Copying template from %s", self.directory)
        try:
            shutil.copytree(
                self.directory,
                destination,
                symlinks=True,
                ignore=shutil.ignore_patterns(*METADATA_DIRS),
            )
        except OSError as exc:
            raise RetrievalError(f"could not copy template: {exc}") from exc


def strip_metadata(root: Path) -> None:
    """Remove version control metadata left behind by retrieval."""

    for name in METADATA_DIRS:
        candidate = root / name
        if candidate.is_dir():
            LOGGER.debug("Removing %s", candidate)
            shutil.rmtree(candidate)
        elif candidate.exists():
            candidate.unlink()


def build_source(settings: ScaffoldSettings) -> TemplateSource:
    """Return the template source described by ``settings``.

    An existing local directory is copied; anything else is cloned with git.
    """

    candidate = Path(settings.template_repo).expanduser()
    if candidate.is_dir():
        return DirectoryTemplateSource(candidate)
    return GitTemplateSource(settings.template_repo, depth=settings.clone_depth)
