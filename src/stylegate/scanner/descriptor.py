"""Structured summaries of scanned source files."""

from __future__ import annotations

from pathlib import PurePosixPath

from attrs import field, frozen

from stylegate.types import Casing, DeclarationKind, FileCategory
from stylegate.utils import first_where

#: Marker in `FileDescriptor.disabled_rules` that disables every rule.
ALL_RULES = "*"


def name_suffixes(name: str) -> tuple[str, ...]:
    """Dotted suffixes between the stem and the extension of a file name.

    `Button.test.js` has suffixes `(".test",)`. The leading dot of a hidden
    file is not a separator.
    """
    return tuple(f".{part.lower()}" for part in name.removeprefix(".").split(".")[1:-1])


@frozen
class Identifier:
    """
    Represents a top-level declaration in a source file.
    """

    #: The declared name.
    name: str
    #: The declaring keyword.
    kind: DeclarationKind
    #: Casing style of the name.
    casing: Casing
    #: 1-based line of the declaration.
    line: int
    #: Whether the declaration is exported.
    exported: bool = False
    #: Whether the declaration is a function, or a variable bound to one.
    callable: bool = False


@frozen
class FileDescriptor:
    """
    Represents the scanner's summary of one source file.
    """

    #: Path relative to the scan root, with POSIX separators.
    path: str
    #: Inferred kind of file.
    category: FileCategory
    #: Name of the default export, None if anonymous or absent.
    default_export: str | None = None
    #: Line of the default export, if any.
    default_export_line: int | None = None
    #: Top-level declarations, in source order.
    identifiers: tuple[Identifier, ...] = field(default=(), converter=tuple)
    #: Whether the file contains JSX.
    renders_jsx: bool = False
    #: Whether a class in the file extends a React component base class.
    extends_component: bool = False
    #: Names of hooks called anywhere in the file.
    hook_calls: frozenset[str] = field(default=frozenset(), converter=frozenset)
    #: Rule IDs disabled through comments, `ALL_RULES` disables every rule.
    disabled_rules: frozenset[str] = field(default=frozenset(), converter=frozenset)

    @property
    def name(self) -> str:
        """File name including extension."""
        return PurePosixPath(self.path).name

    @property
    def stem(self) -> str:
        """File name up to the first dot, e.g. `Button` for `Button.test.js`.

        A leading dot is skipped, `.eslintrc.js` has stem `eslintrc`.
        """
        return self.name.removeprefix(".").split(".", 1)[0]

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix

    @property
    def suffixes(self) -> tuple[str, ...]:
        return name_suffixes(self.name)

    @property
    def directories(self) -> tuple[str, ...]:
        return PurePosixPath(self.path).parent.parts

    def get_identifier(self, name: str) -> Identifier | None:
        return first_where(self.identifiers, lambda ident: ident.name == name)

    def is_rule_disabled(self, rule_id: str) -> bool:
        return ALL_RULES in self.disabled_rules or rule_id in self.disabled_rules
