# backend/solid_notify/channels/service.py

"""
通知チャンネルのインターフェースと実装。

- NotificationChannel: send(message) だけを持つ最小インターフェース
- LabeledChannel: 「<ラベル>: <本文>」を出力する共通実装
- EmailChannel / SMSChannel / PushChannel: ラベルだけが異なる具体実装

実際のメール / SMS / プッシュ送信は行わず、整形した 1 行を Emitter に書き出すだけ。
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .schemas import ChannelKind, EmailOptions

logger = logging.getLogger(__name__)


# 出力先の型（整形済みの 1 行を受け取る callable）
Emitter = Callable[[str], None]


def write_stdout(line: str) -> None:
    """デフォルトの Emitter。標準出力に 1 行書き出す。"""
    print(line)


class NotificationChannel(Protocol):
    """
    通知送信の最小インターフェース。

    実装例:
    - EmailChannel: "Email: ..." を出力
    - SMSChannel: "SMS: ..." を出力
    - PushChannel: "Push: ..." を出力
    """

    def send(self, message: str) -> None:  # pragma: no cover - Protocol
        ...


class LabeledChannel:
    """
    固定ラベルを接頭辞にしてメッセージを出力するチャンネルの共通実装。

    - サブクラスは kind / label を定義するだけでよい
    - 状態は Emitter の参照のみで、呼び出しごとに何も蓄積しない
    """

    kind: ChannelKind
    label: str

    def __init__(self, emit: Optional[Emitter] = None) -> None:
        self._emit: Emitter = emit or write_stdout

    def render(self, message: str) -> str:
        """出力する文字列を組み立てて返す（出力はしない）。"""
        return f"{self.label}: {message}"

    def send(self, message: str) -> None:
        """整形したメッセージを Emitter に書き出す。"""
        self._write(self.render(message))

    def _write(self, line: str) -> None:
        logger.debug("Notification emitted. channel=%s line=%r", self.kind.value, line)
        self._emit(line)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmailChannel(LabeledChannel):
    """
    Email 通知。

    EmailOptions で宛先・件名を渡すと出力に区間が追加される:
    - 指定なし:        "Email: <message>"
    - recipient:       "Email to <recipient>: <message>"
    - recipient+subject: "Email to <recipient> with subject '<subject>': <message>"
    """

    kind = ChannelKind.EMAIL
    label = "Email"

    def render(self, message: str, options: Optional[EmailOptions] = None) -> str:
        if options is None or options.recipient is None:
            return super().render(message)

        header = f"{self.label} to {options.recipient}"
        if options.subject is not None:
            header += f" with subject '{options.subject}'"
        return f"{header}: {message}"

    def send(self, message: str, options: Optional[EmailOptions] = None) -> None:
        self._write(self.render(message, options))


class SMSChannel(LabeledChannel):
    """SMS 通知。"""

    kind = ChannelKind.SMS
    label = "SMS"


class PushChannel(LabeledChannel):
    """プッシュ通知。"""

    kind = ChannelKind.PUSH
    label = "Push"
