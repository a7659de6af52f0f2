import pytest

from messagerie.input_fields import IpField, MessageField, TextField


@pytest.mark.parametrize("char", list("0123456789."))
def test_ip_field_accepts_digits_and_dot(char):
    assert IpField().accepts(char) is True


@pytest.mark.parametrize("char", ["a", "-", " ", ":", "", "12"])
def test_ip_field_rejects_others(char):
    assert IpField().accepts(char) is False


def test_ip_field_typing():
    field = IpField()
    typed = [field.type_char(c) for c in "127.0.x0.1"]
    assert field.text == "127.0.0.1"
    assert typed.count(False) == 1


def test_backspace_removes_last_and_stops_at_empty():
    field = IpField("10")
    field.backspace()
    assert field.text == "1"
    field.backspace()
    field.backspace()
    assert field.text == ""


@pytest.mark.parametrize("char", [" ", "~", "a", "Z", "!"])
def test_message_field_accepts_printable(char):
    assert MessageField().accepts(char) is True


@pytest.mark.parametrize("char", ["\n", "\t", "\x7f", "\x1f", "é"])
def test_message_field_rejects_non_printable(char):
    assert MessageField().accepts(char) is False


def test_message_field_clear():
    field = MessageField()
    for char in "hi there":
        field.type_char(char)
    assert field.text == "hi there"
    field.clear()
    assert field.text == ""


def test_max_length_is_respected():
    field = TextField(max_length=3)
    results = [field.type_char(c) for c in "abcd"]
    assert field.text == "abc"
    assert results == [True, True, True, False]


def test_default_capacity_leaves_room_for_terminator():
    from messagerie.connection import BUFSIZ

    assert MessageField().max_length == BUFSIZ - 1