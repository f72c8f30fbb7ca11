"""Scanning of project trees into file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path, PurePosixPath

from loguru import logger

from stylegate.config import StylegateConfig
from stylegate.types import FileCategory

from .descriptor import ALL_RULES as ALL_RULES
from .descriptor import FileDescriptor as FileDescriptor
from .descriptor import Identifier as Identifier
from .descriptor import name_suffixes
from .javascript import analyse_source
from .walk import find_source_files

#: Extensions of files that cannot contain JSX.
NON_JSX_EXTENSIONS = frozenset({".ts", ".mts", ".cts"})
TEST_SUFFIXES = (".test", ".spec")
STORY_SUFFIXES = (".stories", ".story")
TESTS_DIRECTORY = "__tests__"


class UnreadablePathError(Exception):
    """Raised when the root of a scan is missing or cannot be read."""

    #: The offending path.
    path: Path
    #: Why the path cannot be scanned.
    reason: str

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot scan {path}: {reason}")
        self.path = path
        self.reason = reason


def categorize(
    path: PurePosixPath, *, renders_jsx: bool, extends_component: bool
) -> FileCategory:
    suffixes = name_suffixes(path.name)
    if TESTS_DIRECTORY in path.parent.parts or any(s in TEST_SUFFIXES for s in suffixes):
        return FileCategory.TEST
    if any(s in STORY_SUFFIXES for s in suffixes):
        return FileCategory.STORY
    if renders_jsx or extends_component:
        return FileCategory.COMPONENT
    return FileCategory.PLAIN


def describe_source(path: str | PurePosixPath, text: str) -> FileDescriptor:
    """Build the descriptor of a source file from its relative path and content."""
    path = PurePosixPath(path)
    summary = analyse_source(
        text, jsx_allowed=path.suffix.lower() not in NON_JSX_EXTENSIONS
    )
    return FileDescriptor(
        path=path.as_posix(),
        category=categorize(
            path,
            renders_jsx=summary.renders_jsx,
            extends_component=summary.extends_component,
        ),
        default_export=summary.default_export,
        default_export_line=summary.default_export_line,
        identifiers=summary.identifiers,
        renders_jsx=summary.renders_jsx,
        extends_component=summary.extends_component,
        hook_calls=summary.hook_calls,
        disabled_rules=summary.disabled_rules,
    )


def read_source(path: Path, max_file_size: int) -> str | None:
    """Read a source file, or return None when it should be skipped."""
    try:
        size = path.stat().st_size
        if size > max_file_size:
            logger.warning(f"Skipping {path}: {size} bytes exceeds limit of {max_file_size}")
            return None
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning(f"Skipping {path}: not valid UTF-8")
    except OSError as exc:
        logger.warning(f"Skipping {path}: {exc}")
    return None


def check_root(root: Path | str) -> Path:
    """Make sure `root` is a directory that can be scanned.

    :raises     UnreadablePathError:  When `root` is missing, not a directory,
                                      or not readable.
    """
    root = Path(root)
    try:
        if not root.exists():
            raise UnreadablePathError(root, "path does not exist")
        if not root.is_dir():
            raise UnreadablePathError(root, "not a directory")
        readable = os.access(root, os.R_OK | os.X_OK)
    except OSError as exc:
        raise UnreadablePathError(root, exc.strerror or str(exc)) from exc

    if not readable:
        raise UnreadablePathError(root, "permission denied")
    return root


def scan(root: Path | str, config: StylegateConfig | None = None) -> Iterator[FileDescriptor]:
    """Scan the project at `root` and lazily describe its source files.

    The root is validated immediately, files are read only as the returned
    iterator is consumed. Descriptors are produced in lexicographic order of
    their relative paths.

    :raises     UnreadablePathError:  When `root` is missing, not a directory,
                                      or not readable.
    """
    root = check_root(root)
    return _scan(root.resolve(), config or StylegateConfig())


def _scan(root: Path, config: StylegateConfig) -> Iterator[FileDescriptor]:
    logger.debug(f"Scanning {root}")
    for relative in find_source_files(root, config.ignore, config.extensions):
        text = read_source(root / relative, config.max_file_size)
        if text is None:
            continue
        logger.debug(f"Describing {relative}")
        yield describe_source(relative, text)
