from __future__ import annotations

import io
import json

import rich.console

from stylegate.reporter import JsonReporter, TerminalReporter, emit, sort_violations
from stylegate.rules import Violation

VIOLATIONS = [
    Violation('pascal-case-component', 'b.js', 'expected PascalCase, got b', 1),
    Violation('pascal-case-component', 'a.js', 'expected PascalCase, got a', 3),
    Violation('camel-case-identifier', 'a.js', 'expected camelCase, got my_b', 7),
    Violation('camel-case-identifier', 'a.js', 'expected camelCase, got my_a', 2),
]


def make_console() -> tuple[rich.console.Console, io.StringIO]:
    out = io.StringIO()
    return rich.console.Console(file=out, width=999, highlight=False), out


def describe_sort_violations() -> None:

    def should_sort_by_path_rule_and_line() -> None:
        assert [(v.path, v.rule_id, v.line) for v in sort_violations(VIOLATIONS)] == [
            ('a.js', 'camel-case-identifier', 2),
            ('a.js', 'camel-case-identifier', 7),
            ('a.js', 'pascal-case-component', 3),
            ('b.js', 'pascal-case-component', 1),
        ]

    def should_sort_missing_lines_first() -> None:
        later = Violation('rule', 'a.js', 'm', 4)
        unknown = Violation('rule', 'a.js', 'm')

        assert sort_violations([later, unknown]) == [unknown, later]


def describe_emit() -> None:

    def should_pass_without_violations() -> None:
        console, out = make_console()

        assert emit([], TerminalReporter(console)) is True
        assert out.getvalue() == 'No violations found, keep it up!\n'

    def should_fail_with_violations() -> None:
        console, out = make_console()

        assert emit(VIOLATIONS, TerminalReporter(console)) is False
        assert out.getvalue().splitlines() == [
            'a.js: [camel-case-identifier] expected camelCase, got my_a',
            'a.js: [camel-case-identifier] expected camelCase, got my_b',
            'a.js: [pascal-case-component] expected PascalCase, got a',
            'b.js: [pascal-case-component] expected PascalCase, got b',
            'Found 4 violations in 2 files.',
        ]

    def should_not_interpret_markup_in_messages() -> None:
        console, out = make_console()

        emit([Violation('rule', '[id].js', 'got [bold]x[/bold]')], TerminalReporter(console))

        assert out.getvalue().splitlines() == [
            '[id].js: [rule] got [bold]x[/bold]',
            'Found 1 violation in 1 file.',
        ]

    def should_be_deterministic() -> None:
        console1, out1 = make_console()
        console2, out2 = make_console()

        emit(VIOLATIONS, TerminalReporter(console1))
        emit(list(reversed(VIOLATIONS)), TerminalReporter(console2))

        assert out1.getvalue() == out2.getvalue()


def describe_json_reporter() -> None:

    def should_write_sorted_array() -> None:
        out = io.StringIO()

        passed = emit(VIOLATIONS[:2], JsonReporter(out))

        assert not passed
        assert json.loads(out.getvalue()) == [
            {'path': 'a.js', 'rule': 'pascal-case-component', 'line': 3, 'message': 'expected PascalCase, got a'},
            {'path': 'b.js', 'rule': 'pascal-case-component', 'line': 1, 'message': 'expected PascalCase, got b'},
        ]

    def should_write_empty_array() -> None:
        out = io.StringIO()

        assert emit([], JsonReporter(out))
        assert json.loads(out.getvalue()) == []
