"""Fluent, copy-on-write builder for CSS selector strings.

Example::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    # -> a[href$=".png"]:focus

Every call returns a new builder; the receiver is never modified.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorOrderError,
)
from selector_builder.model import COMBINATOR_TOKENS, Combinator, Gate, SelectorDescriptor

__all__ = [
    "CombinedSelector",
    "SelectorBuilder",
    "Stringifiable",
    "css_selector_builder",
    "stringify",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


def stringify(value: Stringifiable) -> str:
    """Render a builder or combined selector as CSS text."""
    return value.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    Operands may themselves be combined selectors, so chains nest to the right.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class SelectorBuilder:
    """An immutable step in building one compound selector."""

    descriptor: SelectorDescriptor = field(default_factory=SelectorDescriptor)
    config: BuilderConfig = field(default_factory=BuilderConfig)

    # --- single-valued parts --------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        self._check(Gate.ELEMENT)
        return self._replace(element=name)

    def id(self, value: str) -> SelectorBuilder:
        self._check(Gate.ID)
        return self._replace(id=value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._check(Gate.PSEUDO_ELEMENT)
        return self._replace(pseudo_element=value)

    # --- multi-valued parts ---------------------------------------------------

    def class_(self, value: str) -> SelectorBuilder:
        self._check(Gate.CLASS)
        return self._replace(classes=(*self.descriptor.classes, value))

    def attr(self, value: str) -> SelectorBuilder:
        self._check(Gate.ATTRIBUTE)
        return self._replace(attributes=(*self.descriptor.attributes, value))

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._check(Gate.PSEUDO_CLASS)
        return self._replace(
            pseudo_classes=(*self.descriptor.pseudo_classes, value)
        )

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        left: Stringifiable,
        combinator: str | Combinator,
        right: Stringifiable,
    ) -> CombinedSelector:
        """Join two selectors with *combinator*.

        The token is padded with one space on each side. Any string is
        accepted unless ``config.strict_combinators`` is set, in which case
        only " ", "+", "~" and ">" are allowed.
        """
        for operand in (left, right):
            if not isinstance(operand, Stringifiable):
                raise TypeError(
                    f"Cannot combine {type(operand).__name__!r}: expected a selector"
                )
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        if self.config.strict_combinators and token not in COMBINATOR_TOKENS:
            logger.debug("Rejected combinator %r", token)
            raise InvalidCombinatorError(token)
        return CombinedSelector(left=left, combinator=token, right=right)

    def with_config(self, config: BuilderConfig) -> SelectorBuilder:
        return dataclasses.replace(self, config=config)

    def stringify(self) -> str:
        return self.descriptor.render()

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ------------------------------------------------------------

    def _check(self, gate: Gate) -> None:
        """Raise if writing *gate* would break uniqueness or grammar order."""
        if gate.single_valued and self.descriptor.has(gate):
            logger.debug("Rejected duplicate %s on %r", gate.name, self.stringify())
            raise DuplicateSelectorPartError(gate)
        highest = self.descriptor.highest_gate()
        if highest is not None and highest > gate:
            logger.debug(
                "Rejected %s after %s on %r", gate.name, highest.name, self.stringify()
            )
            raise SelectorOrderError(gate)

    def _replace(self, **changes: object) -> SelectorBuilder:
        descriptor = dataclasses.replace(self.descriptor, **changes)  # type: ignore[arg-type]
        return dataclasses.replace(self, descriptor=descriptor)


css_selector_builder = SelectorBuilder()
