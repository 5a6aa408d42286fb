"""Plain records and their JSON round-trip."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

from selector_builder.errors import ParseError

__all__ = ["Rectangle", "from_json", "to_json"]

T = TypeVar("T")


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def to_json(value: Any) -> str:
    """Serialize a dataclass instance or JSON-compatible value to JSON text."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    return json.dumps(value)


def from_json(cls: type[T], text: str) -> T:
    """Parse JSON text and build an instance of *cls* from its fields.

    Raises:
        ParseError: If the text is not valid JSON, is not a JSON object, or
            its keys do not match the constructor of *cls*.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return cls(**data)
    except TypeError as exc:
        raise ParseError(
            f"Cannot build {cls.__name__} from JSON: {exc}", cause=exc
        ) from exc
