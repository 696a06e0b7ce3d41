"""Ordered literal substitutions applied to template files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "ROLE_SUFFIXES",
    "Substitution",
    "SubstitutionPlan",
    "build_plan",
]


DEFAULT_PLACEHOLDER = "app"

# Most specific first: EquationTest contains Equation.
ROLE_SUFFIXES = ("EquationTest", "Equation", "Model")
PATH_SUFFIXES = (".model", ".equation", "/", ".")


class Substitution(BaseModel):
    """Replace every occurrence of ``literal`` with ``replacement``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    literal: str = Field(..., min_length=1, description="Exact text to look for.")
    replacement: str = Field(..., description="Text written in place of the literal.")


class SubstitutionPlan:
    """An ordered sequence of :class:`Substitution` rules.

    Rules are appended from most specific to least specific. Appending a
    literal that contains an earlier literal would let the generic rule shadow
    the specific one, so :meth:`append` rejects it, as well as duplicates.

    :meth:`apply` rewrites a buffer in a single scan. At every position the
    earliest rule that matches wins and the text it produces is never
    rescanned, so a replacement that itself contains a placeholder is not
    substituted a second time.
    """

    def __init__(self, substitutions: Iterable[Substitution] = ()) -> None:
        self._entries: list[Substitution] = []
        self._pattern: re.Pattern[str] | None = None
        for substitution in substitutions:
            self.append(substitution.literal, substitution.replacement)

    def append(self, literal: str, replacement: str) -> "SubstitutionPlan":
        """Add a rule after every existing one and return the plan."""

        entry = Substitution(literal=literal, replacement=replacement)
        for existing in self._entries:
            if existing.literal == entry.literal:
                raise ValueError(f"duplicate substitution for '{literal}'")
            if existing.literal in entry.literal:
                raise ValueError(
                    f"'{literal}' must be added before the more generic '{existing.literal}'"
                )
        self._entries.append(entry)
        self._pattern = None
        return self

    @property
    def literals(self) -> tuple[str, ...]:
        return tuple(entry.literal for entry in self._entries)

    def __iter__(self) -> Iterator[Substitution]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Substitution:
        return self._entries[index]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{entry.literal!r}->{entry.replacement!r}" for entry in self._entries)
        return f"SubstitutionPlan([{pairs}])"

    def _compiled(self) -> re.Pattern[str]:
        if self._pattern is None:
            # Alternation tries branches left to right, i.e. in plan order.
            self._pattern = re.compile("|".join(re.escape(literal) for literal in self.literals))
        return self._pattern

    def apply(self, text: str) -> str:
        """Return ``text`` with every rule applied."""

        if not self._entries:
            return text

        replacements = {entry.literal: entry.replacement for entry in self._entries}
        return self._compiled().sub(lambda match: replacements[match.group(0)], text)


def build_plan(
    identifier: str,
    slug: str,
    *,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> SubstitutionPlan:
    """Build the substitution plan renaming the template's placeholder symbols.

    Parameters
    ----------
    identifier:
        Canonical PascalCase project name, e.g. ``Widget``.
    slug:
        Canonical snake_case project name, e.g. ``widget``.
    placeholder:
        The template's lowercase placeholder word. Its capitalised form is used
        for type names such as ``AppModel``.
    """

    capitalized = placeholder.capitalize()
    plan = SubstitutionPlan()

    for suffix in ROLE_SUFFIXES:
        plan.append(f"{capitalized}{suffix}", f"{identifier}{suffix}")
    for suffix in PATH_SUFFIXES:
        plan.append(f"{placeholder}{suffix}", f"{slug}{suffix}")

    plan.append(capitalized, identifier)
    plan.append(placeholder, slug)
    return plan
