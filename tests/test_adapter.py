import pytest

from patternkit.adapter import (
    OrdinaryTarget,
    SpecificTarget,
    Target,
    TargetAdapter,
    call,
    main,
)


def test_ordinary_target_request():
    assert OrdinaryTarget().request() == "Ordinary requet."


def test_specific_request_is_unchanged():
    assert SpecificTarget().specific_request() == ".tseuqer cificepS"


def test_adapter_reverses_adaptee_response():
    adaptee = SpecificTarget()
    adapter = TargetAdapter(adaptee)
    assert adapter.request()[::-1] == adaptee.specific_request()


def test_adapter_result_is_readable():
    assert TargetAdapter(SpecificTarget()).request() == "Specific request."


def test_adapter_can_be_called_as_a_target(capsys):
    call(TargetAdapter(SpecificTarget()))
    assert capsys.readouterr().out == "'Specific request.'\n"


def test_call_quotes_response(capsys):
    call(OrdinaryTarget())
    assert capsys.readouterr().out == f"'{OrdinaryTarget().request()}'\n"


def test_target_is_abstract():
    with pytest.raises(TypeError):
        Target()


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(f"'{OrdinaryTarget().request()}'")
    assert lines[1] == "Adaptee is incompatible with client: '.tseuqer cificepS'"
    assert lines[2].endswith(f"'{TargetAdapter(SpecificTarget()).request()}'")