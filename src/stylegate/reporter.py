from __future__ import annotations

from typing import TextIO, override

import abc
import json
import sys
from collections.abc import Iterable, Sequence

import rich.console
from rich.markup import escape

from stylegate.rules import Violation
from stylegate.utils import plural


def sort_violations(violations: Iterable[Violation]) -> list[Violation]:
    """Order violations by path, then rule, then line, then message."""
    return sorted(violations, key=Violation.sort_key)


class Reporter(abc.ABC):
    @abc.abstractmethod
    def report_results(self, violations: Sequence[Violation]) -> None:
        """Write out already sorted violations."""
        raise NotImplementedError("To be implemented by subclass")


class TerminalReporter(Reporter):
    def __init__(self, console: rich.console.Console | None = None) -> None:
        self._console = console

    @override
    def report_results(self, violations: Sequence[Violation]) -> None:
        console = self._console or rich.console.Console(
            width=999, highlight=False, emoji=False, soft_wrap=True
        )
        if not violations:
            console.print("[green]No violations found, keep it up!")
            return

        for violation in violations:
            console.print(
                f"[bold]{escape(violation.path)}[/bold]: "
                f"[red]{escape(f'[{violation.rule_id}]')}[/red] {escape(violation.message)}"
            )

        num_files = len({violation.path for violation in violations})
        console.print(
            f"[yellow]Found {plural(len(violations), 'violation')} in {plural(num_files, 'file')}."
        )


class JsonReporter(Reporter):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @override
    def report_results(self, violations: Sequence[Violation]) -> None:
        stream = self._stream or sys.stdout
        payload = [
            {
                "path": violation.path,
                "rule": violation.rule_id,
                "line": violation.line,
                "message": violation.message,
            }
            for violation in violations
        ]
        stream.write(json.dumps(payload, indent=2) + "\n")


def emit(violations: Iterable[Violation], reporter: Reporter | None = None) -> bool:
    """
    Report violations in deterministic order.

    Returns True iff there are no violations.
    """
    ordered = sort_violations(violations)
    (reporter or TerminalReporter()).report_results(ordered)
    return not ordered
