"""Error hierarchy for selector construction and record parsing."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model import Gate

UNIQUE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class ErrorKind(Enum):
    """Machine-readable error category, for branching without message matching."""

    DUPLICATE_PART = "duplicate_part"
    ORDER = "order"
    COMBINATOR = "combinator"
    PARSE = "parse"


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    kind: ErrorKind

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DuplicateSelectorPartError(SelectorError):
    """A single-valued part (element, id, pseudo-element) was written twice."""

    kind = ErrorKind.DUPLICATE_PART

    def __init__(self, part: Gate, message: str = UNIQUE_PART_MESSAGE) -> None:
        super().__init__(message)
        self.part = part


class SelectorOrderError(SelectorError):
    """A part was written after a later part in grammar order already holds data."""

    kind = ErrorKind.ORDER

    def __init__(self, part: Gate, message: str = ORDER_MESSAGE) -> None:
        super().__init__(message)
        self.part = part


class InvalidCombinatorError(SelectorError):
    """A combinator token outside the canonical set was used in strict mode."""

    kind = ErrorKind.COMBINATOR

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid combinator: {token!r}")
        self.token = token


class ParseError(SelectorError):
    """Raised when serialized record text cannot be parsed."""

    kind = ErrorKind.PARSE

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, cause=cause)
