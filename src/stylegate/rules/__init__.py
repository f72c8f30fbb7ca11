"""Conformance rules and their registry."""

from __future__ import annotations

from .base import FunctionRule as FunctionRule
from .base import Rule as Rule
from .base import Violation as Violation
from .layout import FilenameMatchesExportRule, TestFileSuffixRule
from .naming import CamelCaseIdentifierRule, HookNamingRule, PascalCaseComponentRule
from .registry import DuplicateRuleError as DuplicateRuleError
from .registry import RuleRegistry
from .registry import UnknownRuleError as UnknownRuleError


def get_all_rules() -> list[Rule]:
    return [
        PascalCaseComponentRule(),
        CamelCaseIdentifierRule(),
        HookNamingRule(),
        FilenameMatchesExportRule(),
        TestFileSuffixRule(),
    ]


def default_registry() -> RuleRegistry:
    """Create a registry holding all built-in rules."""
    return RuleRegistry(get_all_rules())
