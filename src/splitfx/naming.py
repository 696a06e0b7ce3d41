"""Project name normalisation.

A project name typed by the user is turned into two canonical forms: the
PascalCase *identifier* used for type and symbol names, and the snake_case
*slug* used for folders, files and lowercase symbol paths.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from typing import NamedTuple

__all__ = [
    "CanonicalName",
    "is_identifier",
    "normalize",
    "pascal_case",
    "slugify",
    "snake_case",
    "split_words",
]


IDENTIFIER_PATTERN = re.compile(r"[A-Z][A-Za-z0-9]*")
FALLBACK_IDENTIFIER = "Project"
FALLBACK_SLUG = "project"

_SEPARATORS = re.compile(r"[\s\-]+")
_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Za-z]+")
# myApp -> my|App, HTTPServer -> HTTP|Server
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class CanonicalName(NamedTuple):
    """The two canonical forms of a project name."""

    identifier: str
    slug: str


def _fold_ascii(value: str) -> str:
    text = unicodedata.normalize("NFKD", value)
    return text.encode("ascii", "ignore").decode("ascii")


def slugify(value: str | Iterable[str], *, separator: str = "-") -> str:
    """Create a lowercase, filesystem friendly slug from ``value``.

    Parameters
    ----------
    value:
        The text to normalise. When an iterable of strings is provided the values
        are joined with spaces before slugification.
    separator:
        The character used to join individual words.
    """

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        value = " ".join(str(part) for part in value)

    text = _fold_ascii(str(value))
    text = re.sub(r"[\s]+", " ", text)
    text = re.sub(r"[^\w\- ]", "", text, flags=re.ASCII)
    text = text.strip().lower()

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def is_identifier(value: str) -> bool:
    """Return ``True`` when ``value`` is already a canonical identifier."""

    return IDENTIFIER_PATTERN.fullmatch(value) is not None


def split_words(value: str) -> list[str]:
    """Split ``value`` into ASCII alphanumeric words.

    Any non-alphanumeric character separates words, and so do case boundaries
    (``myApp`` gives ``["my", "App"]``, ``HTTPServer`` gives
    ``["HTTP", "Server"]``).
    """

    text = _CASE_BOUNDARY.sub(" ", _fold_ascii(value))
    return [word for word in _NON_ALPHANUMERIC.split(text) if word]


def pascal_case(value: str) -> str:
    """Return ``value`` as a PascalCase identifier."""

    words = split_words(value)
    if not words:
        return FALLBACK_IDENTIFIER

    candidate = "".join(word[:1].upper() + word[1:].lower() for word in words)
    if candidate[0].isdigit():
        candidate = f"{FALLBACK_IDENTIFIER}{candidate}"
    return candidate


def snake_case(value: str) -> str:
    """Return ``value`` as lowercase words joined by underscores."""

    return slugify(split_words(value), separator="_") or FALLBACK_SLUG


def normalize(raw: str) -> CanonicalName:
    """Derive the canonical identifier and slug for ``raw``.

    A name that already looks like an identifier is kept exactly as typed so
    deliberate casing such as ``MyHTTPApp`` survives. The slug is always
    derived from ``raw``, whichever form the identifier took.
    """

    if not raw or not raw.strip():
        raise ValueError("project name must not be empty")

    identifier = raw if is_identifier(raw) else pascal_case(raw)
    return CanonicalName(identifier=identifier, slug=snake_case(raw))
