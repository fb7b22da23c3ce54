import pytest

from patternkit.abstract_factory import (
    Button,
    Checkbox,
    GuiFactory,
    MacButton,
    MacCheckbox,
    MacFactory,
    WindowsButton,
    WindowsCheckbox,
    WindowsFactory,
    main,
    render,
)


@pytest.mark.parametrize(
    "factory, button_cls, checkbox_cls",
    [
        (MacFactory(), MacButton, MacCheckbox),
        (WindowsFactory(), WindowsButton, WindowsCheckbox),
    ],
)
def test_factory_creates_matching_family(factory, button_cls, checkbox_cls):
    button = factory.create_button()
    checkbox = factory.create_checkbox()
    assert type(button) is button_cls
    assert type(checkbox) is checkbox_cls
    assert isinstance(button, Button) and isinstance(checkbox, Checkbox)


def test_mac_widgets_print(capsys):
    MacButton().press()
    MacCheckbox().switch()
    out = capsys.readouterr().out
    assert out == "MacOS button has pressed\nMacOS checkbox has switched\n"


def test_windows_widgets_print(capsys):
    WindowsButton().press()
    WindowsCheckbox().switch()
    out = capsys.readouterr().out
    assert out == "Windows button has pressed\nWindows check has switched\n"


def test_render_order(capsys):
    render(WindowsFactory())
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Windows button has pressed",
        "Windows button has pressed",
        "Windows check has switched",
        "Windows check has switched",
    ]


def test_render_mac(capsys):
    render(MacFactory())
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("MacOS button has pressed") == 2
    assert lines.count("MacOS checkbox has switched") == 2
    assert len(lines) == 4


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GuiFactory()


def test_main_default_is_windows(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Windows button has pressed" in out
    assert "MacOS" not in out


def test_main_mac(capsys):
    assert main(["--platform", "mac"]) == 0
    out = capsys.readouterr().out
    assert out.count("MacOS checkbox has switched") == 2
    assert "Windows" not in out


def test_main_rejects_unknown_platform():
    with pytest.raises(SystemExit) as info:
        main(["--platform", "amiga"])
    assert info.value.code == 2