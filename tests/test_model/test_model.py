"""Tests for the selector descriptor, gates, errors and config."""

from __future__ import annotations

import pytest

from selector_builder import (
    BuilderConfig,
    Combinator,
    DuplicateSelectorPartError,
    ErrorKind,
    Gate,
    ParseError,
    SelectorDescriptor,
    SelectorError,
    SelectorOrderError,
)


class TestGate:
    def test_grammar_order(self):
        assert list(Gate) == sorted(Gate)
        assert Gate.ELEMENT < Gate.ID < Gate.CLASS < Gate.ATTRIBUTE
        assert Gate.ATTRIBUTE < Gate.PSEUDO_CLASS < Gate.PSEUDO_ELEMENT

    def test_single_valued(self):
        assert {g for g in Gate if g.single_valued} == {
            Gate.ELEMENT,
            Gate.ID,
            Gate.PSEUDO_ELEMENT,
        }


class TestCombinator:
    def test_values(self):
        assert {c.value for c in Combinator} == {" ", ">", "+", "~"}


class TestSelectorDescriptor:
    def test_empty(self):
        desc = SelectorDescriptor()
        assert desc.highest_gate() is None
        assert desc.render() == ""

    def test_highest_gate(self):
        desc = SelectorDescriptor(element="a", attributes=("href",))
        assert desc.highest_gate() is Gate.ATTRIBUTE

    def test_has(self):
        desc = SelectorDescriptor(id="x", classes=("",))
        assert desc.has(Gate.ID)
        assert desc.has(Gate.CLASS)
        assert not desc.has(Gate.ELEMENT)
        assert not desc.has(Gate.PSEUDO_CLASS)

    def test_empty_single_value_not_present(self):
        assert not SelectorDescriptor(element="").has(Gate.ELEMENT)

    def test_render(self):
        desc = SelectorDescriptor(
            element="a",
            id="home",
            classes=("nav", "active"),
            attributes=("href",),
            pseudo_classes=("hover",),
            pseudo_element="after",
        )
        assert desc.render() == "a#home.nav.active[href]:hover::after"

    def test_frozen(self):
        desc = SelectorDescriptor()
        with pytest.raises(AttributeError):
            desc.element = "a"  # type: ignore[misc]


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(DuplicateSelectorPartError, SelectorError)
        assert issubclass(SelectorOrderError, SelectorError)
        assert issubclass(ParseError, SelectorError)
        assert issubclass(SelectorError, Exception)

    def test_kinds(self):
        assert DuplicateSelectorPartError(Gate.ID).kind is ErrorKind.DUPLICATE_PART
        assert SelectorOrderError(Gate.ID).kind is ErrorKind.ORDER
        assert ParseError("bad").kind is ErrorKind.PARSE

    def test_parse_error_position(self):
        err = ParseError("bad", line=2, column=5)
        assert err.line == 2
        assert err.column == 5
        assert str(err) == "bad"


class TestBuilderConfig:
    def test_defaults(self):
        assert BuilderConfig().strict_combinators is False

    def test_frozen(self):
        cfg = BuilderConfig(strict_combinators=True)
        with pytest.raises(AttributeError):
            cfg.strict_combinators = False  # type: ignore[misc]
