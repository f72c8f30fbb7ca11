"""Heuristic analysis of JavaScript and TypeScript sources.

This is not a parser. Comments and the contents of string
literals are blanked out first, keeping the line structure intact, after
which top-level declarations are recognised line by line using the bracket
depth at the start of each line. Regular expression literals containing
quotes or brackets may confuse the analysis.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import attrs
from attrs import field, frozen

from stylegate.types import DeclarationKind
from stylegate.utils.casing import detect_casing

from .descriptor import ALL_RULES, Identifier

_IDENT = r"[A-Za-z_$][\w$]*"

_FUNCTION_RE = re.compile(
    rf"^(?P<export>export\s+(?P<default>default\s+)?)?(?:async\s+)?function\b\s*\*?\s*(?P<name>{_IDENT})?"
)
_CLASS_RE = re.compile(
    rf"^(?P<export>export\s+(?P<default>default\s+)?)?(?:abstract\s+)?class\b(?:\s+(?!extends\b)(?P<name>{_IDENT}))?"
)
_VARIABLE_RE = re.compile(
    rf"^(?P<export>export\s+)?(?:declare\s+)?(?P<kind>const|let|var)\s+(?P<name>{_IDENT})"
)
_DEFAULT_NAME_RE = re.compile(
    rf"^export\s+default\s+(?:(?:React\.)?(?:memo|forwardRef)\(\s*)?(?P<name>{_IDENT})\s*\)?\s*;?$"
)
_CALLABLE_INIT_RE = re.compile(
    rf"^\s*(?::[^=]+)?=\s*(?:async\s+)?(?:function\b|{_IDENT}\s*=>|\([^)]*\)\s*(?::[^=]+)?=>|\(\s*$|(?:React\.)?(?:memo|forwardRef|useCallback)\()"
)
_DEFAULT_ANY_RE = re.compile(r"^export\s+default\b")
_EXPORT_LIST_RE = re.compile(r"^export\s*(?:type\s*)?\{(?P<names>[^}]*)\}")
_MODULE_EXPORTS_RE = re.compile(rf"^module\.exports\s*=\s*(?P<name>{_IDENT})\s*;?$")

_COMPONENT_BASE_RE = re.compile(r"\bextends\s+(?:React\.)?(?:Pure)?Component\b")
_JSX_RE = re.compile(
    r"(?:^|[=(,:?&|{]|\breturn|=>)\s*<(?:[A-Za-z][\w.:-]*|>)", re.MULTILINE
)
_HOOK_CALL_RE = re.compile(r"(?<![\w$])(?:React\.)?(?P<name>use[A-Z][\w$]*)\s*\(")
_FUNCTION_KEYWORD_TAIL_RE = re.compile(r"function\s*\*?\s*$")
_DISABLE_RE = re.compile(r"(?<![\w-])stylegate-disable(?![\w-])(?P<rest>.*)", re.DOTALL)
_RULE_ID_RE = re.compile(r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*")

_OPENING = "{(["
_CLOSING = "})]"

_KEYWORD_KINDS = {
    "const": DeclarationKind.CONST,
    "let": DeclarationKind.LET,
    "var": DeclarationKind.VAR,
}


@frozen
class SourceSummary:
    """Facts extracted from a single source text."""

    identifiers: tuple[Identifier, ...] = field(converter=tuple)
    default_export: str | None
    default_export_line: int | None
    renders_jsx: bool
    extends_component: bool
    hook_calls: frozenset[str] = field(converter=frozenset)
    disabled_rules: frozenset[str] = field(converter=frozenset)


def split_source(text: str) -> tuple[str, list[str]]:
    """Separate code from comments.

    Returns the source with comments and string literal contents replaced by
    spaces (newlines and quote characters are kept) and the list of comment
    texts.
    """
    out: list[str] = []
    comments: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == "/" and nxt == "/":
            end = text.find("\n", i)
            end = n if end < 0 else end
            comments.append(text[i + 2 : end])
            out.append(" " * (end - i))
            i = end
        elif ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            end = n if end < 0 else end + 2
            comments.append(text[i + 2 : max(i + 2, end - 2)])
            out.append(_blank(text[i:end]))
            i = end
        elif ch in "\"'`":
            end = _string_end(text, i)
            if end is None:
                # Unterminated quote, e.g. an apostrophe in JSX text.
                out.append(ch)
                i += 1
                continue
            body_end = end - 1 if end - i >= 2 and text[end - 1] == ch else end
            out.append(ch)
            out.append(_blank(text[i + 1 : body_end]))
            out.append(text[body_end:end])
            i = end
        else:
            out.append(ch)
            i += 1

    return "".join(out), comments


def _blank(segment: str) -> str:
    return "".join(c if c == "\n" else " " for c in segment)


def _string_end(text: str, start: int) -> int | None:
    """Index just past the string literal starting at `start`.

    Single- and double-quoted strings must close on the same line, None is
    returned when they do not. Template literals may span lines and run to
    the end of the text when left open.
    """
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            return None
        i += 1
    return n if quote == "`" else None


def parse_disable_directives(comments: Iterable[str]) -> frozenset[str]:
    """Collect rule IDs disabled by `stylegate-disable` comments.

    A directive without rule IDs disables every rule. Text after `--` is a
    free-form reason and is ignored.
    """
    disabled: set[str] = set()
    for comment in comments:
        match = _DISABLE_RE.search(comment)
        if match is None:
            continue
        rest = match.group("rest").split("--", 1)[0]
        rule_ids = _RULE_ID_RE.findall(rest)
        if rule_ids:
            disabled.update(rule_ids)
        else:
            disabled.add(ALL_RULES)
    return frozenset(disabled)


def _line_depths(code: str) -> list[tuple[int, str]]:
    """Pair every line with the bracket depth at its start."""
    depth = 0
    result: list[tuple[int, str]] = []
    for line in code.split("\n"):
        result.append((depth, line))
        for ch in line:
            if ch in _OPENING:
                depth += 1
            elif ch in _CLOSING:
                depth = max(0, depth - 1)
    return result


def find_hook_calls(code: str) -> frozenset[str]:
    hooks: set[str] = set()
    for match in _HOOK_CALL_RE.finditer(code):
        # `function useThing(` is a definition, not a call.
        if _FUNCTION_KEYWORD_TAIL_RE.search(code[max(0, match.start() - 16) : match.start()]):
            continue
        hooks.add(match.group("name"))
    return frozenset(hooks)


def analyse_source(text: str, *, jsx_allowed: bool = True) -> SourceSummary:
    """Extract declarations, exports and React usage from a source text."""
    code, comments = split_source(text)

    identifiers: list[Identifier] = []
    exported_names: set[str] = set()
    default_export: str | None = None
    default_export_line: int | None = None
    has_default = False

    def declare(
        name: str,
        kind: DeclarationKind,
        lineno: int,
        exported: bool,
        is_callable: bool,
    ) -> None:
        identifiers.append(
            Identifier(
                name,
                kind,
                detect_casing(name),
                lineno,
                exported=exported,
                callable=is_callable,
            )
        )

    for lineno, (depth, raw_line) in enumerate(_line_depths(code), start=1):
        if depth:
            continue
        line = raw_line.strip()
        if not line:
            continue

        if m := _FUNCTION_RE.match(line):
            name = m.group("name")
            if name:
                declare(name, DeclarationKind.FUNCTION, lineno, bool(m.group("export")), True)
            if m.group("default") and not has_default:
                has_default = True
                default_export, default_export_line = name, lineno
        elif m := _CLASS_RE.match(line):
            name = m.group("name")
            if name:
                declare(name, DeclarationKind.CLASS, lineno, bool(m.group("export")), False)
            if m.group("default") and not has_default:
                has_default = True
                default_export, default_export_line = name, lineno
        elif m := _VARIABLE_RE.match(line):
            declare(
                m.group("name"),
                _KEYWORD_KINDS[m.group("kind")],
                lineno,
                bool(m.group("export")),
                _CALLABLE_INIT_RE.match(line[m.end() :]) is not None,
            )
        elif (m := _DEFAULT_NAME_RE.match(line)) or (
            m := _MODULE_EXPORTS_RE.match(line)
        ):
            if not has_default:
                has_default = True
                default_export, default_export_line = m.group("name"), lineno
            exported_names.add(m.group("name"))
        elif m := _EXPORT_LIST_RE.match(line):
            for spec in m.group("names").split(","):
                local, _, alias = (part.strip() for part in spec.partition(" as "))
                if not local:
                    continue
                exported_names.add(local)
                if alias == "default" and not has_default:
                    has_default = True
                    default_export, default_export_line = local, lineno
        elif _DEFAULT_ANY_RE.match(line) and not has_default:
            # Default export of an arbitrary expression, e.g. an object literal.
            has_default = True
            default_export_line = lineno

    if exported_names:
        identifiers = [
            ident
            if ident.exported or ident.name not in exported_names
            else attrs.evolve(ident, exported=True)
            for ident in identifiers
        ]

    return SourceSummary(
        identifiers=identifiers,
        default_export=default_export,
        default_export_line=default_export_line,
        renders_jsx=jsx_allowed and _JSX_RE.search(code) is not None,
        extends_component=_COMPONENT_BASE_RE.search(code) is not None,
        hook_calls=find_hook_calls(code),
        disabled_rules=parse_disable_directives(comments),
    )
