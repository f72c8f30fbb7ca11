"""Application of rules to scanned files."""

from __future__ import annotations

from typing import NamedTuple

from collections.abc import Iterable, Sequence

from loguru import logger

from stylegate.rules import Rule, Violation
from stylegate.scanner import FileDescriptor


class RuleExecutionError(Exception):
    """Raised when a rule's check fails on a file."""

    #: Identifier of the failing rule.
    rule_id: str
    #: Path of the file being checked.
    path: str
    #: The exception raised by the check.
    cause: Exception

    def __init__(self, rule_id: str, path: str, cause: Exception) -> None:
        super().__init__(
            f"Rule {rule_id} failed on {path}: {type(cause).__name__}: {cause}"
        )
        self.rule_id = rule_id
        self.path = path
        self.cause = cause

    def to_violation(self) -> Violation:
        """Represent the failure as an entry in the report."""
        return Violation(
            self.rule_id, self.path, f"rule raised {type(self.cause).__name__}: {self.cause}"
        )


class EvaluationResult(NamedTuple):
    #: All violations, including entries for failed rules.
    violations: list[Violation]
    #: Failures of individual rules.
    errors: list[RuleExecutionError]
    #: Number of files the rules were applied to.
    files_checked: int

    @property
    def passed(self) -> bool:
        return not self.violations


def _run_rule(rule: Rule, file: FileDescriptor) -> list[Violation]:
    violations = list(rule.check(file))
    for violation in violations:
        if violation.rule_id != rule.id:
            raise ValueError(
                f"reported a violation of another rule ({violation.rule_id!r})"
            )
    return violations


def evaluate(files: Iterable[FileDescriptor], rules: Sequence[Rule]) -> EvaluationResult:
    """
    Apply every rule to every file and collect all violations.

    Files are consumed one at a time. A rule that raises is reported as a
    `RuleExecutionError` and does not stop the evaluation of other rules or
    files. Rules disabled by a file's directives are skipped for that file.
    """
    violations: list[Violation] = []
    errors: list[RuleExecutionError] = []
    files_checked = 0

    for file in files:
        files_checked += 1
        for rule in rules:
            if file.is_rule_disabled(rule.id):
                logger.debug(f"Rule {rule.id} disabled in {file.path}")
                continue

            try:
                found = _run_rule(rule, file)
            except Exception as exc:
                error = RuleExecutionError(rule.id, file.path, exc)
                logger.opt(exception=exc).error(str(error))
                errors.append(error)
                violations.append(error.to_violation())
                continue

            violations.extend(found)

    logger.debug(
        f"Evaluated {len(rules)} rules on {files_checked} files: "
        f"{len(violations)} violations, {len(errors)} rule errors"
    )
    return EvaluationResult(violations, errors, files_checked)
