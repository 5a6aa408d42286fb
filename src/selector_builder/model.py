"""Selector model: the immutable descriptor, grammar gates, and combinators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Gate(IntEnum):
    """Selector part categories in the order CSS grammar requires them."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def single_valued(self) -> bool:
        return self in _SINGLE_VALUED


_SINGLE_VALUED = frozenset({Gate.ELEMENT, Gate.ID, Gate.PSEUDO_ELEMENT})


class Combinator(str, Enum):
    """Canonical tokens joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


COMBINATOR_TOKENS = frozenset(c.value for c in Combinator)


@dataclass(frozen=True)
class SelectorDescriptor:
    """The parts of one compound selector.

    Single-valued parts are ``None`` (or empty) when unset; multi-valued parts
    keep insertion order.
    """

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None

    def has(self, gate: Gate) -> bool:
        """Return True if the part for *gate* holds data."""
        value = self._value(gate)
        if gate.single_valued:
            return bool(value)
        return len(value) > 0  # type: ignore[arg-type]

    def highest_gate(self) -> Gate | None:
        """Return the latest gate in grammar order that holds data."""
        for gate in reversed(Gate):
            if self.has(gate):
                return gate
        return None

    def _value(self, gate: Gate) -> str | tuple[str, ...] | None:
        return {
            Gate.ELEMENT: self.element,
            Gate.ID: self.id,
            Gate.CLASS: self.classes,
            Gate.ATTRIBUTE: self.attributes,
            Gate.PSEUDO_CLASS: self.pseudo_classes,
            Gate.PSEUDO_ELEMENT: self.pseudo_element,
        }[gate]

    def render(self) -> str:
        """Render the descriptor as CSS text in grammar order."""
        parts = [self.element or ""]
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{body}]" for body in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element:
            parts.append(f"::{self.pseudo_element}")
        return "".join(parts)
