"""Helpers to build source files and project trees in tests."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from textwrap import dedent

from stylegate.scanner import FileDescriptor, describe_source

#: Permission bits do not restrict the superuser.
IS_SUPERUSER = hasattr(os, "geteuid") and os.geteuid() == 0


def js(source: str) -> str:
    """Dedent an inline source text and drop its leading newline."""
    return dedent(source).lstrip("\n")


def describe(path: str, source: str) -> FileDescriptor:
    """Describe an inline source text as if it was scanned at `path`."""
    return describe_source(path, js(source))


def write_tree(root: Path, files: Mapping[str, str | bytes]) -> Path:
    """Write files, given by path relative to `root`, creating directories as needed."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(js(content), encoding="utf-8")
    return root


@contextmanager
def restricted_mode(path: Path, mode: int) -> Iterator[Path]:
    """Temporarily change the permission bits of `path`."""
    original = path.stat().st_mode
    path.chmod(mode)
    try:
        yield path
    finally:
        path.chmod(original)
