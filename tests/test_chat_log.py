import pytest

from messagerie.chat_log import (
    LINE_SPACING,
    MAX_MESSAGES,
    ORIGIN_X,
    ORIGIN_Y,
    ChatMessage,
    MessageLog,
)


def test_first_message_at_origin():
    log = MessageLog()
    message = log.push("hello")
    assert message.position == (300, 800)
    assert len(log) == 1
    assert [m.text for m in log] == ["hello"]


def test_push_scrolls_older_messages_up():
    log = MessageLog()
    log.push("first")
    log.push("second")
    first, second = list(log)
    assert first.text == "first"
    assert second.position == (ORIGIN_X, ORIGIN_Y)
    assert first.y == ORIGIN_Y - LINE_SPACING
    assert first.x == ORIGIN_X


def test_log_keeps_at_most_sixteen_messages():
    log = MessageLog()
    for number in range(MAX_MESSAGES + 1):
        log.push(str(number))
    texts = [m.text for m in log]
    assert len(log) == 16
    assert texts == [str(n) for n in range(1, MAX_MESSAGES + 1)]


def test_lines_are_evenly_spaced():
    log = MessageLog()
    for number in range(40):
        log.push(f"m{number}")
    ys = [m.y for m in log]
    assert ys[-1] == ORIGIN_Y
    assert all(later - earlier == LINE_SPACING for earlier, later in zip(ys, ys[1:]))


def test_custom_limit():
    log = MessageLog(max_messages=2)
    for text in ("a", "b", "c"):
        log.push(text)
    assert [m.text for m in log] == ["b", "c"]


def test_invalid_limit():
    with pytest.raises(ValueError):
        MessageLog(max_messages=0)


def test_chat_message_defaults():
    message = ChatMessage("x")
    assert message.position == (ORIGIN_X, ORIGIN_Y)