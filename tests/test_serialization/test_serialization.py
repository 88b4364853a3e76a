"""Tests for the JSON helpers."""

from __future__ import annotations

import json

import pytest

from objtasks.serialization import from_json, get_json
from objtasks.shapes import Rectangle


class Circle:
    def __init__(self, radius: float) -> None:
        raise AssertionError("from_json must not call __init__")

    def get_circumference(self) -> float:
        return 2 * 3.14 * self.radius


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self) -> None:
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self) -> None:
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self) -> None:
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object(self) -> None:
        class Point:
            def __init__(self) -> None:
                self.x = 1
                self.y = 2

        assert get_json(Point()) == '{"x":1,"y":2}'

    def test_sort_keys(self) -> None:
        assert get_json({"b": 1, "a": 2}, sort_keys=True) == '{"a":2,"b":1}'

    def test_indent(self) -> None:
        assert get_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_scalars(self) -> None:
        assert get_json("text") == '"text"'
        assert get_json(None) == "null"

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            get_json(object())


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_instance_of_class(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10

    def test_methods_available(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert c.get_circumference() == pytest.approx(62.8)

    def test_dataclass_target(self) -> None:
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200
        assert r == Rectangle(10, 20)

    def test_round_trip_with_get_json(self) -> None:
        r = Rectangle(3, 4)
        assert from_json(Rectangle, get_json(r)) == r

    def test_extra_keys_become_attributes(self) -> None:
        r = from_json(Rectangle, '{"width":1,"height":2,"color":"red"}')
        assert r.color == "red"  # type: ignore[attr-defined]

    def test_malformed_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{radius: 10")

    def test_non_object_payload(self) -> None:
        with pytest.raises(TypeError, match="Expected a JSON object"):
            from_json(Circle, "[1, 2]")
