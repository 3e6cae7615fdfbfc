"""Struct embedding: a wheel is a circle is a point."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    x: int = 0
    y: int = 0

    def __repr__(self) -> str:
        return f"Point{{X:{self.x}, Y:{self.y}}}"


@dataclass
class Circle:
    point: Point = field(default_factory=Point)
    radius: int = 0

    @property
    def x(self) -> int:
        return self.point.x

    @x.setter
    def x(self, value: int) -> None:
        self.point.x = value

    @property
    def y(self) -> int:
        return self.point.y

    @y.setter
    def y(self, value: int) -> None:
        self.point.y = value

    def __repr__(self) -> str:
        return f"Circle{{Point:{self.point!r}, Radius:{self.radius}}}"


@dataclass
class Wheel:
    circle: Circle = field(default_factory=Circle)
    spokes: int = 0

    @property
    def x(self) -> int:
        return self.circle.x

    @x.setter
    def x(self, value: int) -> None:
        self.circle.x = value

    @property
    def y(self) -> int:
        return self.circle.y

    @y.setter
    def y(self, value: int) -> None:
        self.circle.y = value

    @property
    def radius(self) -> int:
        return self.circle.radius

    @radius.setter
    def radius(self, value: int) -> None:
        self.circle.radius = value

    def __repr__(self) -> str:
        return f"Wheel{{Circle:{self.circle!r}, Spokes:{self.spokes}}}"


def main(argv: list[str] | None = None) -> int:
    w = Wheel(Circle(Point(8, 8), 5), 20)
    print(repr(w))
    w.x = 42
    print(repr(w))
    return 0