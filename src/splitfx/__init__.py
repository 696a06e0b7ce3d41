"""Scaffold SplitFXM++ apps from the AppFXMpp template.

The package clones the template repository, derives a PascalCase identifier
and a snake_case slug from the requested app name, renames the template's
placeholder folders and test files, and rewrites the placeholder symbols in
every file with an ordered substitution plan. It can be used programmatically
or through the ``create-splitfxmpp-app`` command.
"""

from __future__ import annotations

from .config import ProjectConfig, ScaffoldSettings
from .errors import PreconditionError, RetrievalError, ScaffoldError
from .naming import CanonicalName, normalize
from .plan import Substitution, SubstitutionPlan, build_plan
from .retrieval import DirectoryTemplateSource, GitTemplateSource, TemplateSource
from .rewrite import rename_matching_files, rename_path, rewrite_tree
from .scaffold import ProjectScaffolder

__all__ = [
    "CanonicalName",
    "DirectoryTemplateSource",
    "GitTemplateSource",
    "PreconditionError",
    "ProjectConfig",
    "ProjectScaffolder",
    "RetrievalError",
    "ScaffoldError",
    "ScaffoldSettings",
    "Substitution",
    "SubstitutionPlan",
    "TemplateSource",
    "build_plan",
    "normalize",
    "rename_matching_files",
    "rename_path",
    "rewrite_tree",
]

__version__ = "0.1.0"
