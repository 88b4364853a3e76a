from __future__ import annotations

from objtasks.shapes import Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).get_area() == 200

    def test_area_follows_fields(self) -> None:
        r = Rectangle(2, 3)
        r.width = 5
        assert r.get_area() == 15

    def test_fractional_area(self) -> None:
        assert Rectangle(1.5, 4).get_area() == 6.0

    def test_equality(self) -> None:
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)
