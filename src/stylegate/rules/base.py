from __future__ import annotations

from typing import ClassVar, NamedTuple, final, override

import abc
import inspect
import re
from collections.abc import Callable, Iterable

from stylegate.scanner import FileDescriptor
from stylegate.types import FileCategory

RULE_ID_RE = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


class Violation(NamedTuple):
    #: ID of the rule that was violated.
    rule_id: str
    #: Path of the offending file, relative to the project root.
    path: str
    #: Human-readable explanation.
    message: str
    #: Line the violation was found on, if known.
    line: int | None = None

    def sort_key(self) -> tuple[str, str, int, str]:
        return (self.path, self.rule_id, self.line or 0, self.message)

    @override
    def __str__(self) -> str:
        return f"{self.path}: [{self.rule_id}] {self.message}"


type CheckFunction = Callable[[FileDescriptor], Iterable[Violation]]


def _class_name_to_id(name: str) -> str:
    """`PascalCaseComponentRule` -> `pascal-case-component`."""
    base = name.removesuffix("Rule")
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", base).lower()


class Rule(abc.ABC):
    #: Unique identifier, derived from the class name if not given.
    id: ClassVar[str] = ""
    description: ClassVar[str]
    #: Categories of files the rule applies to, None for all files.
    categories: ClassVar[frozenset[FileCategory] | None] = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)

        if not cls.id and not inspect.isabstract(cls):
            cls.id = _class_name_to_id(cls.__name__)

    def applies_to(self, file: FileDescriptor) -> bool:
        return self.categories is None or file.category in self.categories

    @abc.abstractmethod
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        raise NotImplementedError("To be implemented by subclass")

    def check(self, file: FileDescriptor) -> list[Violation]:
        """Check a single file, returning all violations of this rule."""
        if not self.applies_to(file):
            return []
        return list(self.scan(file))

    def violation(
        self, file: FileDescriptor, message: str, line: int | None = None
    ) -> Violation:
        return Violation(self.id, file.path, message, line)

    @override
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.id!r}>"


@final
class FunctionRule(Rule):
    """Rule whose check is a plain function."""

    def __init__(self, rule_id: str, description: str, check: CheckFunction) -> None:
        self.id = rule_id  # type: ignore[misc]
        self.description = description  # type: ignore[misc]
        self._check = check

    @override
    def scan(self, file: FileDescriptor) -> Iterable[Violation]:
        return self._check(file)
