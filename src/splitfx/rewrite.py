"""In-place rewriting and renaming of a materialised template tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .plan import SubstitutionPlan

__all__ = [
    "rename_matching_files",
    "rename_path",
    "replace_token",
    "rewrite_file",
    "rewrite_tree",
]


LOGGER = logging.getLogger(__name__)

NamePredicate = Callable[[str], bool]
NameTransform = Callable[[str], str]


def rewrite_file(path: str | Path, plan: SubstitutionPlan) -> bool:
    """Apply ``plan`` to the content of ``path``.

    The whole file is decoded as UTF-8, rewritten in memory and written back in
    one go. Line endings are preserved. Files that are not valid UTF-8 are left
    untouched. Returns ``True`` when the file content changed.
    """

    path = Path(path)
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        LOGGER.warning("Skipping non UTF-8 file %s", path)
        return False

    rewritten = plan.apply(text)
    if rewritten == text:
        return False

    path.write_bytes(rewritten.encode("utf-8"))
    LOGGER.debug("Rewrote %s", path)
    return True


def rewrite_tree(root: str | Path, plan: SubstitutionPlan) -> list[Path]:
    """Rewrite every file below ``root`` with ``plan``.

    Directories are visited depth first. Each file is handled independently so
    the outcome does not depend on the order of siblings. Symlinks are not
    followed.

    Running this twice over the same tree is not safe: when a replacement
    contains the placeholder (slug ``my_app`` for placeholder ``app``) the
    second run rewrites the project's own names again.
    """

    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(root)

    changed: list[Path] = []
    for entry in root.iterdir():
        if entry.is_symlink():
            LOGGER.debug("Not following symlink %s", entry)
            continue
        if entry.is_dir():
            changed.extend(rewrite_tree(entry, plan))
        elif rewrite_file(entry, plan):
            changed.append(entry)
    return changed


def rename_path(root: str | Path, source: str | Path, destination: str | Path) -> Path:
    """Move ``root/source`` to ``root/destination`` and return the new path."""

    root = Path(root)
    old_path = root / source
    new_path = root / destination

    if not old_path.exists():
        raise FileNotFoundError(f"{old_path} does not exist")
    if new_path.exists():
        raise FileExistsError(f"{new_path} already exists")

    new_path.parent.mkdir(parents=True, exist_ok=True)
    old_path.rename(new_path)
    LOGGER.debug("Renamed %s -> %s", old_path, new_path)
    return new_path


def rename_matching_files(
    directory: str | Path,
    predicate: NamePredicate,
    rename: NameTransform,
) -> list[Path]:
    """Rename the direct children of ``directory`` whose name matches ``predicate``.

    The scan is not recursive. Each matching entry is renamed to
    ``rename(name)`` inside the same directory.
    """

    directory = Path(directory)
    matches = sorted(entry for entry in directory.iterdir() if predicate(entry.name))

    renamed: list[Path] = []
    for entry in matches:
        new_name = rename(entry.name)
        if new_name == entry.name:
            continue
        renamed.append(rename_path(directory, entry.name, new_name))
    return renamed


def replace_token(token: str, replacement: str) -> tuple[NamePredicate, NameTransform]:
    """Return a predicate/rename pair swapping the first ``token`` in a filename."""

    if not token:
        raise ValueError("token must not be empty")

    def predicate(name: str) -> bool:
        return token in name

    def rename(name: str) -> str:
        return name.replace(token, replacement, 1)

    return predicate, rename
