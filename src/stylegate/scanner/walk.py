"""Discovery of source files in a project tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath

from loguru import logger


def is_ignored(relative: PurePosixPath, patterns: Iterable[str]) -> bool:
    """Check whether a path relative to the project root matches an ignore pattern.

    Patterns are matched against every component of the path as well as
    against the whole relative path, so `node_modules` ignores such a
    directory at any depth while `src/legacy/*` only ignores that subtree.
    """
    posix = relative.as_posix()
    for pattern in patterns:
        if fnmatchcase(posix, pattern):
            return True
        if any(fnmatchcase(part, pattern) for part in relative.parts):
            return True
    return False


def find_source_files(
    root: Path, ignore: Sequence[str], extensions: Sequence[str]
) -> list[PurePosixPath]:
    """Find all source files below `root`, sorted lexicographically by path.

    Returns paths relative to `root`. Symbolic links are not followed and
    ignored directories are not descended into.
    """
    wanted = {ext.lower() for ext in extensions}
    found = list(_find_source_files(root, PurePosixPath(), ignore, wanted))
    return sorted(found, key=lambda p: p.as_posix())


def _find_source_files(
    root: Path, relative: PurePosixPath, ignore: Sequence[str], extensions: set[str]
) -> Iterable[PurePosixPath]:
    directory = root / relative
    try:
        children = list(directory.iterdir())
    except OSError as exc:
        logger.warning(f"Skipping unreadable directory {directory}: {exc}")
        return

    for child in children:
        child_relative = relative / child.name
        if child.is_symlink():
            logger.debug(f"Not following symbolic link {child_relative}")
            continue
        if is_ignored(child_relative, ignore):
            logger.debug(f"Ignoring {child_relative}")
            continue

        if child.is_dir():
            yield from _find_source_files(root, child_relative, ignore, extensions)
        elif child.is_file() and child.suffix.lower() in extensions:
            yield child_relative
