"""Configuration helpers shared by the project scaffolder and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .naming import normalize
from .plan import DEFAULT_PLACEHOLDER

__all__ = ["DEFAULT_TEMPLATE_REPO", "ENV_PREFIX", "ProjectConfig", "ScaffoldSettings"]


DEFAULT_TEMPLATE_REPO = "https://github.com/gpavanb1/AppFXMpp.git"
ENV_PREFIX = "SPLITFX_"


class ScaffoldSettings(BaseModel):
    """Tool wide settings describing the template and how to fetch it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    template_repo: str = Field(
        DEFAULT_TEMPLATE_REPO,
        min_length=1,
        description="Git URL or local directory holding the template.",
    )
    clone_depth: int = Field(1, ge=1, description="History depth passed to git clone.")
    placeholder: str = Field(
        DEFAULT_PLACEHOLDER,
        pattern=r"^[a-z][a-z0-9]*$",
        description="Lowercase placeholder word used throughout the template.",
    )
    include_dir: str = Field("include", min_length=1, description="Folder holding the placeholder package.")
    tests_dir: str = Field("tests", min_length=1, description="Folder holding the placeholder test files.")
    log_level: str = Field(
        "WARNING",
        pattern=r"^(CRITICAL|ERROR|WARNING|INFO|DEBUG)$",
        description="Level passed to logging.basicConfig by the CLI.",
    )

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ScaffoldSettings":
        """Build settings from ``SPLITFX_*`` environment variables.

        Only ``SPLITFX_TEMPLATE_REPO``, ``SPLITFX_CLONE_DEPTH`` and
        ``SPLITFX_LOG_LEVEL`` are read; unset or blank variables keep the
        defaults.
        """

        environment: Mapping[str, str] = env if env is not None else os.environ
        values: dict[str, str] = {}
        for field_name in ("template_repo", "clone_depth", "log_level"):
            raw = environment.get(f"{ENV_PREFIX}{field_name.upper()}", "").strip()
            if raw:
                values[field_name] = raw
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        return cls.model_validate(values)


@dataclass(slots=True)
class ProjectConfig:
    """Derived names and location of a project being scaffolded.

    Attributes
    ----------
    name:
        The raw name provided by the user.
    identifier:
        PascalCase name used for symbols and for the project folder.
    slug:
        snake_case name used for the package folder and lowercase symbols.
    target:
        Absolute path of the folder the template is materialised into.
    """

    name: str
    identifier: str
    slug: str
    target: Path

    @classmethod
    def from_name(cls, name: str, directory: str | Path | None = None) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` for ``name`` inside ``directory``.

        ``directory`` defaults to the current working directory. A blank name
        raises :class:`ValueError`.
        """

        identifier, slug = normalize(name)
        base = Path(directory) if directory is not None else Path.cwd()
        target = base.expanduser().resolve() / identifier
        return cls(name=name, identifier=identifier, slug=slug, target=target)
