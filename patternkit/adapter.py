"""Adapter: make an incompatible object usable through the expected interface."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Target(ABC):
    """The interface a client expects."""

    @abstractmethod
    def request(self) -> str:
        """Return the response to a request."""


class OrdinaryTarget(Target):
    def request(self) -> str:
        return "Ordinary requet."


class SpecificTarget:
    """An object with a useful but incompatible interface."""

    def specific_request(self) -> str:
        return ".tseuqer cificepS"


class TargetAdapter(Target):
    """Presents a SpecificTarget as a Target."""

    def __init__(self, adaptee: SpecificTarget) -> None:
        self.adaptee = adaptee

    def request(self) -> str:
        return self.adaptee.specific_request()[::-1]


def call(target: Target) -> None:
    """Print the quoted response of a target."""
    print(f"'{target.request()}'")


def main(argv: list[str] | None = None) -> int:
    """Call a compatible target and an adapted one."""
    argparse.ArgumentParser(description="Adapter example.").parse_args(argv)

    print("A compatible target can be directly called: ", end="")
    call(OrdinaryTarget())

    adaptee = SpecificTarget()
    print(f"Adaptee is incompatible with client: '{adaptee.specific_request()}'")

    adapter = TargetAdapter(adaptee)
    print("But with adapter client can call its method: ", end="")
    call(adapter)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())