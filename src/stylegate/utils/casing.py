"""Classification of identifier casing."""

from __future__ import annotations

import re

from stylegate.types import Casing

_SCREAMING_SNAKE_RE = re.compile(r"^[A-Z][A-Z0-9]*(_[A-Z0-9]+)*$")
_SNAKE_RE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)+$")
_KEBAB_RE = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)+$")
_PASCAL_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
_CAMEL_RE = re.compile(r"^[a-z][A-Za-z0-9]*$")


def detect_casing(name: str) -> Casing:
    """Classify the casing style of `name`.

    Leading underscores and dollar signs are ignored, so `_privateThing` is
    camelCase. Single-word lowercase names count as camelCase and single
    capitalised words as PascalCase. All-caps names of more than one
    character are SCREAMING_SNAKE_CASE, even without underscores.
    """
    core = name.lstrip("_$")
    if not core:
        return Casing.MIXED

    if len(core) > 1 and _SCREAMING_SNAKE_RE.match(core):
        return Casing.SCREAMING_SNAKE
    if _PASCAL_RE.match(core):
        return Casing.PASCAL
    if _CAMEL_RE.match(core):
        return Casing.CAMEL
    if _SNAKE_RE.match(core):
        return Casing.SNAKE
    if _KEBAB_RE.match(core):
        return Casing.KEBAB
    return Casing.MIXED


def is_hook_name(name: str) -> bool:
    """Check whether `name` follows the React hook convention (`useXxx`)."""
    return len(name) > 3 and name.startswith("use") and name[3].isupper()
