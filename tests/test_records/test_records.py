"""Tests for Rectangle and the JSON helpers."""

from __future__ import annotations

import json

import pytest

from selector_builder import ErrorKind, ParseError, Rectangle, from_json, to_json


class TestRectangle:
    def test_fields_and_area(self):
        rect = Rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20
        assert rect.area() == 200


class TestToJson:
    def test_dataclass(self):
        assert json.loads(to_json(Rectangle(10, 20))) == {"width": 10, "height": 20}

    def test_plain_values(self):
        assert to_json([1, 2, 3]) == "[1, 2, 3]"
        assert json.loads(to_json({"a": "b"})) == {"a": "b"}


class TestFromJson:
    def test_builds_instance(self):
        rect = from_json(Rectangle, '{ "width": 10, "height": 20 }')
        assert isinstance(rect, Rectangle)
        assert rect.area() == 200

    def test_from_to_json(self):
        rect = from_json(Rectangle, to_json(Rectangle(3, 4)))
        assert rect == Rectangle(3, 4)

    def test_malformed(self):
        with pytest.raises(ParseError) as exc_info:
            from_json(Rectangle, '{ "width": 10,')
        assert exc_info.value.kind is ErrorKind.PARSE
        assert exc_info.value.line == 1
        assert exc_info.value.column is not None

    def test_not_an_object(self):
        with pytest.raises(ParseError, match="Expected a JSON object"):
            from_json(Rectangle, "[10, 20]")

    def test_unknown_field(self):
        with pytest.raises(ParseError, match="Cannot build Rectangle"):
            from_json(Rectangle, '{"width": 1, "height": 2, "depth": 3}')

    def test_missing_field(self):
        with pytest.raises(ParseError):
            from_json(Rectangle, '{"width": 1}')
