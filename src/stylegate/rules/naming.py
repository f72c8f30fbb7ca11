"""Naming conventions for components, hooks and top-level identifiers."""

from __future__ import annotations

from typing import final, override

from collections.abc import Iterable

from stylegate.scanner import FileDescriptor
from stylegate.types import Casing, DeclarationKind, FileCategory
from stylegate.utils.casing import detect_casing, is_hook_name

from .base import Rule, Violation


@final
class PascalCaseComponentRule(Rule):
    description = "Components are named in PascalCase"
    categories = frozenset({FileCategory.COMPONENT})

    @override
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        name = file.default_export
        if name is None or detect_casing(name) is Casing.PASCAL:
            return []
        return [
            self.violation(
                file, f"expected PascalCase, got {name}", file.default_export_line
            )
        ]


@final
class CamelCaseIdentifierRule(Rule):
    description = (
        "Top-level functions and variables are camelCase, "
        "PascalCase is reserved for components, constants may be SCREAMING_SNAKE_CASE"
    )

    #: Accepted casing styles per declaration kind. Classes are not checked.
    ALLOWED_CASINGS = {
        DeclarationKind.FUNCTION: frozenset({Casing.CAMEL, Casing.PASCAL}),
        DeclarationKind.LET: frozenset({Casing.CAMEL, Casing.PASCAL}),
        DeclarationKind.VAR: frozenset({Casing.CAMEL, Casing.PASCAL}),
        DeclarationKind.CONST: frozenset(
            {Casing.CAMEL, Casing.PASCAL, Casing.SCREAMING_SNAKE}
        ),
    }

    @override
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        for ident in file.identifiers:
            allowed = self.ALLOWED_CASINGS.get(ident.kind)
            # Placeholders such as `_` or `$` have no casing.
            if allowed is None or ident.casing in allowed or not ident.name.strip("_$"):
                continue
            yield self.violation(file, f"expected camelCase, got {ident.name}", ident.line)


@final
class HookNamingRule(Rule):
    description = 'Functions that call hooks are hooks themselves and start with "use"'
    categories = frozenset(
        {FileCategory.PLAIN, FileCategory.TEST, FileCategory.STORY}
    )

    @override
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        name = file.default_export
        if name is None or not file.hook_calls or is_hook_name(name):
            return []

        # Only functions declared in this file are known to contain the calls.
        ident = file.get_identifier(name)
        if ident is None or not ident.callable:
            return []

        return [
            self.violation(
                file,
                f'functions calling hooks must start with "use", got {name}',
                file.default_export_line,
            )
        ]
