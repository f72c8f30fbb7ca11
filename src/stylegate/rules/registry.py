"""Registry of conformance rules."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from loguru import logger

from .base import RULE_ID_RE, CheckFunction, FunctionRule, Rule


class DuplicateRuleError(Exception):
    """Raised when a rule is registered under an identifier already in use."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"A rule with identifier {rule_id!r} is already registered")
        self.rule_id = rule_id


class UnknownRuleError(Exception):
    """Raised when rules are looked up by identifiers that are not registered."""

    def __init__(self, rule_ids: Iterable[str]) -> None:
        self.rule_ids = sorted(rule_ids)
        super().__init__(f"Unknown rule(s): {', '.join(self.rule_ids)}")


class RuleRegistry:
    """
    Maps rule identifiers to rules, in registration order.

    The registry is only mutated during setup, evaluation reads from it.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: Rule) -> Rule:
        """
        Register a rule.

        :raises     DuplicateRuleError:  When the rule's identifier is taken.
        :raises     ValueError:          When the identifier is not kebab-case.
        """
        if not RULE_ID_RE.match(rule.id):
            raise ValueError(f"Invalid rule identifier {rule.id!r}, expected kebab-case")
        if rule.id in self._rules:
            raise DuplicateRuleError(rule.id)

        logger.debug(f"Registered rule {rule.id}")
        self._rules[rule.id] = rule
        return rule

    def rule(
        self, rule_id: str, description: str
    ) -> Callable[[CheckFunction], FunctionRule]:
        """Decorator registering a check function as a rule."""

        def decorator(check: CheckFunction) -> FunctionRule:
            rule = FunctionRule(rule_id, description, check)
            self.register(rule)
            return rule

        return decorator

    def all(self) -> list[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Rule:
        try:
            return self._rules[rule_id]
        except KeyError:
            raise UnknownRuleError([rule_id]) from None

    def select(self, disabled: Iterable[str] = ()) -> list[Rule]:
        """
        Get all rules except the disabled ones, in registration order.

        :raises     UnknownRuleError:  When a disabled identifier is not registered.
        """
        disabled = set(disabled)
        unknown = disabled - self._rules.keys()
        if unknown:
            raise UnknownRuleError(unknown)
        return [rule for rule_id, rule in self._rules.items() if rule_id not in disabled]

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._rules)
