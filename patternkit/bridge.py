"""Bridge: shapes delegate their drawing to an interchangeable drawing API."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields


class DrawApi(ABC):
    """The drawing operations a shape can delegate to.

    Each operation prints what it drew and returns that same line.
    """

    @abstractmethod
    def draw_circle(self, x: int, y: int, radius: int) -> str:
        """Draw a circle centred at (x, y)."""

    @abstractmethod
    def draw_rectangle(self, x: int, y: int) -> str:
        """Draw an x by y rectangle."""

    @abstractmethod
    def draw_square(self, x: int) -> str:
        """Draw a square with side x."""


class _ConsoleDrawApi(DrawApi):
    """Draws to standard output and keeps a record of every drawing."""

    def __init__(self) -> None:
        self.drawn: list[tuple[str, tuple[int, ...]]] = []

    def _emit(self, kind: str, *dimensions: int) -> str:
        self.drawn.append((kind, dimensions))
        line = f"This is {kind}"
        print(line)
        return line


class WindowsDrawApi(_ConsoleDrawApi):
    def draw_circle(self, x: int, y: int, radius: int) -> str:
        return self._emit("circle", x, y, radius)

    def draw_rectangle(self, x: int, y: int) -> str:
        return self._emit("rectangle", x, y)

    def draw_square(self, x: int) -> str:
        return self._emit("square", x)


class MobileDrawApi(_ConsoleDrawApi):
    def draw_circle(self, x: int, y: int, radius: int) -> str:
        return self._emit("circle", x, y, radius)

    def draw_rectangle(self, x: int, y: int) -> str:
        return self._emit("rectangle", x, y)

    def draw_square(self, x: int) -> str:
        return self._emit("square", x)


class _Shape:
    """Checks that every integer dimension of a shape is non-negative."""

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, int) and value < 0:
                raise ValueError(f"{item.name} must be non-negative, got {value}")


@dataclass
class Circle(_Shape):
    x: int
    y: int
    radius: int
    action: DrawApi

    def draw(self) -> str:
        return self.action.draw_circle(self.x, self.y, self.radius)


@dataclass
class Rectangle(_Shape):
    x: int
    y: int
    action: DrawApi

    def draw(self) -> str:
        """Draw as a square when both sides are equal, else as a rectangle."""
        if self.x == self.y:
            return self.action.draw_square(self.x)
        return self.action.draw_rectangle(self.x, self.y)


@dataclass
class Square(_Shape):
    x: int
    action: DrawApi

    def draw(self) -> str:
        return self.action.draw_square(self.x)


def main(argv: list[str] | None = None) -> int:
    """Draw a circle through the mobile drawing API."""
    argparse.ArgumentParser(description="Bridge example.").parse_args(argv)
    Circle(3, 7, 4, MobileDrawApi()).draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())