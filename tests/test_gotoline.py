import pytest

from ktikz.gotoline import GoToLine, Key


def test_go_to_line_is_zero_based():
    lines = []
    bar = GoToLine(on_go_to_line=lines.append)
    bar.set_maximum(50)
    bar.set_value(10)
    assert bar.go_to_line() == 9
    assert lines == [9]


def test_value_is_clamped_to_range():
    bar = GoToLine()
    bar.set_maximum(20)
    bar.set_value(100)
    assert bar.value == 20
    bar.set_value(-3)
    assert bar.value == 1


def test_lowering_maximum_clamps_value():
    bar = GoToLine()
    bar.set_maximum(40)
    bar.set_value(30)
    bar.set_maximum(5)
    assert bar.value == 5


def test_hide_focuses_editor():
    calls = []
    bar = GoToLine(on_focus_editor=lambda: calls.append("focus"))
    bar.hide()
    assert bar.visible is False
    assert calls == ["focus"]


def test_escape_hides():
    bar = GoToLine()
    bar.key_press(Key.ESCAPE)
    assert bar.visible is False


def test_return_emits_line():
    lines = []
    bar = GoToLine(on_go_to_line=lines.append)
    bar.set_maximum(10)
    bar.set_value(3)
    bar.key_press("Return")
    assert lines == [2]
    assert bar.visible is True


def test_other_key_does_nothing():
    lines = []
    bar = GoToLine(on_go_to_line=lines.append)
    bar.key_press(Key.OTHER)
    assert lines == []
    assert bar.visible is True


def test_unknown_key_name_raises():
    bar = GoToLine()
    with pytest.raises(ValueError):
        bar.key_press("Tab")