"""File naming and placement conventions."""

from __future__ import annotations

from typing import final, override

from collections.abc import Iterable

from stylegate.scanner import TEST_SUFFIXES, TESTS_DIRECTORY, FileDescriptor
from stylegate.types import FileCategory

from .base import Rule, Violation


@final
class FilenameMatchesExportRule(Rule):
    description = "Files are named after their default export"
    categories = frozenset({FileCategory.COMPONENT, FileCategory.PLAIN})

    #: File stems that re-export a directory's content and are exempt.
    EXEMPT_STEMS = frozenset({"index"})

    @override
    def applies_to(self, file: FileDescriptor) -> bool:
        # Hidden files such as `.eslintrc.js` configure tools.
        return super().applies_to(file) and not file.is_hidden

    @override
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        name = file.default_export
        if name is None or file.stem in self.EXEMPT_STEMS or file.stem == name:
            return []
        return [
            self.violation(
                file,
                f"file name {file.stem} does not match default export {name}",
                file.default_export_line,
            )
        ]


@final
class TestFileSuffixRule(Rule):
    description = f"Files in {TESTS_DIRECTORY} carry a .test or .spec suffix"
    categories = frozenset({FileCategory.TEST})
    # Not a test class, despite the name.
    __test__ = False

    @override
    def applies_to(self, file: FileDescriptor) -> bool:
        return super().applies_to(file) and TESTS_DIRECTORY in file.directories

    @override
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        if any(suffix in TEST_SUFFIXES for suffix in file.suffixes):
            return []
        return [
            self.violation(
                file, f"files in {TESTS_DIRECTORY} must use a .test or .spec suffix"
            )
        ]
