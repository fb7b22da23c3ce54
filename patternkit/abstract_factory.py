"""Abstract factory: families of GUI widgets created through one factory."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Button(ABC):
    """A pressable widget."""

    @abstractmethod
    def press(self) -> str:
        """Press the button and return the message it reported."""


class Checkbox(ABC):
    """A switchable widget."""

    @abstractmethod
    def switch(self) -> str:
        """Switch the checkbox and return the message it reported."""


class GuiFactory(ABC):
    """Creates widgets that belong to one platform family."""

    @abstractmethod
    def create_button(self) -> Button:
        """Return a new button of this family."""

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        """Return a new checkbox of this family."""


class MacButton(Button):
    def press(self) -> str:
        message = "MacOS button has pressed"
        print(message)
        return message


class MacCheckbox(Checkbox):
    def switch(self) -> str:
        message = "MacOS checkbox has switched"
        print(message)
        return message


class MacFactory(GuiFactory):
    def create_button(self) -> MacButton:
        return MacButton()

    def create_checkbox(self) -> MacCheckbox:
        return MacCheckbox()


class WindowsButton(Button):
    def press(self) -> str:
        message = "Windows button has pressed"
        print(message)
        return message


class WindowsCheckbox(Checkbox):
    def switch(self) -> str:
        message = "Windows check has switched"
        print(message)
        return message


class WindowsFactory(GuiFactory):
    def create_button(self) -> WindowsButton:
        return WindowsButton()

    def create_checkbox(self) -> WindowsCheckbox:
        return WindowsCheckbox()


_FACTORIES: dict[str, type[GuiFactory]] = {
    "windows": WindowsFactory,
    "mac": MacFactory,
}


def render(factory: GuiFactory) -> None:
    """Create two buttons and two checkboxes, then press and switch them."""
    buttons = [factory.create_button() for _ in range(2)]
    checkboxes = [factory.create_checkbox() for _ in range(2)]
    for button in buttons:
        button.press()
    for checkbox in checkboxes:
        checkbox.switch()


def main(argv: list[str] | None = None) -> int:
    """Render a set of widgets for the chosen platform."""
    parser = argparse.ArgumentParser(description="Render GUI widgets for a platform.")
    parser.add_argument(
        "--platform",
        choices=sorted(_FACTORIES),
        default="windows",
        help="widget family to render (default: windows)",
    )
    args = parser.parse_args(argv)
    render(_FACTORIES[args.platform]())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())