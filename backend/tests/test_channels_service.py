# backend/tests/test_channels_service.py

import logging

import pytest
from pydantic import ValidationError

from solid_notify.channels.schemas import EmailOptions
from solid_notify.channels.service import EmailChannel, PushChannel, SMSChannel


def test_email_channel_send(collector) -> None:
    EmailChannel(emit=collector).send("Hello, User!")

    assert collector.lines == ["Email: Hello, User!"]


def test_sms_channel_send(collector) -> None:
    SMSChannel(emit=collector).send("Meeting at 10 AM")

    assert collector.lines == ["SMS: Meeting at 10 AM"]


def test_push_channel_send(collector) -> None:
    PushChannel(emit=collector).send("New follower")

    assert collector.lines == ["Push: New follower"]


def test_default_emitter_writes_to_stdout(capsys) -> None:
    """
    Emitter を指定しない場合は標準出力に 1 行書き出すこと。
    """
    SMSChannel().send("Meeting at 10 AM")

    captured = capsys.readouterr()
    assert captured.out == "SMS: Meeting at 10 AM\n"


def test_empty_message_is_emitted_as_is(collector) -> None:
    EmailChannel(emit=collector).send("")

    assert collector.lines == ["Email: "]


@pytest.mark.parametrize("channel_cls", [EmailChannel, SMSChannel, PushChannel])
def test_send_twice_emits_identical_lines(collector, channel_cls) -> None:
    """
    同じ引数で 2 回送信すると同じ文字列が 2 回出力されること（状態が蓄積しない）。
    """
    channel = channel_cls(emit=collector)
    channel.send("ping")
    channel.send("ping")

    assert len(collector.lines) == 2
    assert collector.lines[0] == collector.lines[1]


def test_email_with_recipient(collector) -> None:
    options = EmailOptions(recipient="alice@example.com")
    EmailChannel(emit=collector).send("Meeting at 10 AM", options)

    assert collector.lines == ["Email to alice@example.com: Meeting at 10 AM"]


def test_email_with_recipient_and_subject(collector) -> None:
    options = EmailOptions(recipient="alice@example.com", subject="Meeting Reminder")
    EmailChannel(emit=collector).send("Meeting at 10 AM", options)

    assert collector.lines == [
        "Email to alice@example.com with subject 'Meeting Reminder': Meeting at 10 AM"
    ]


def test_email_with_empty_options_matches_base_case(collector) -> None:
    channel = EmailChannel(emit=collector)
    channel.send("Hello, User!", EmailOptions())
    channel.send("Hello, User!")

    assert collector.lines == ["Email: Hello, User!", "Email: Hello, User!"]


def test_email_render_does_not_emit(collector) -> None:
    channel = EmailChannel(emit=collector)
    text = channel.render("hi", EmailOptions(recipient="bob@example.com"))

    assert text == "Email to bob@example.com: hi"
    assert collector.lines == []


def test_email_options_subject_requires_recipient() -> None:
    with pytest.raises(ValidationError):
        EmailOptions(subject="Meeting Reminder")


def test_send_logs_emitted_line(caplog, collector) -> None:
    """
    送信時に DEBUG ログでチャンネル種別と出力内容が記録されること。
    """
    with caplog.at_level(logging.DEBUG, logger="solid_notify.channels.service"):
        PushChannel(emit=collector).send("hello")

    records = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert records
    assert "channel=push" in records[0].getMessage()
    assert "Push: hello" in records[0].getMessage()


@pytest.mark.parametrize("recipient", ["", "   "])
def test_email_options_rejects_empty_recipient(recipient) -> None:
    with pytest.raises(ValidationError):
        EmailOptions(recipient=recipient)
