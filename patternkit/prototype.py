"""Prototype: objects that produce independent copies of themselves."""

from __future__ import annotations

import argparse
import dataclasses
from dataclasses import dataclass

PI = 3.14


@dataclass
class Circle:
    radius: float

    def area(self) -> float:
        return PI * (self.radius * self.radius)

    def clone(self) -> Circle:
        """Return an independent copy of this circle."""
        return dataclasses.replace(self)


def main(argv: list[str] | None = None) -> int:
    """Clone a circle and print the copy."""
    argparse.ArgumentParser(description="Clone a circle.").parse_args(argv)
    original = Circle(radius=5.0)
    copy = original.clone()
    print(f"The new circle is cloned : {copy!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())