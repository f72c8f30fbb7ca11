"""Common types."""

from __future__ import annotations

from enum import Enum


class Casing(Enum):
    """Casing styles of identifiers and file names.

    Element's value is the name used in messages.
    """

    PASCAL = "PascalCase"
    CAMEL = "camelCase"
    SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    MIXED = "mixed"


class FileCategory(Enum):
    """Kind of source file, as inferred by the scanner."""

    COMPONENT = "component"
    TEST = "test"
    STORY = "story"
    PLAIN = "plain"


class DeclarationKind(Enum):
    """Keyword introducing a top-level declaration."""

    FUNCTION = "function"
    CLASS = "class"
    CONST = "const"
    LET = "let"
    VAR = "var"
