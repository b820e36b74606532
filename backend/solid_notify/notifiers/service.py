# backend/solid_notify/notifiers/service.py

"""
チャンネルを保持して通知するサービス。

- Notifier: 1 つのチャンネルを生成時に受け取り、生涯それだけに委譲する（コンポジション）
- BroadcastNotifier: 複数チャンネルに同じメッセージをファンアウトする
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from solid_notify.channels.service import NotificationChannel

logger = logging.getLogger(__name__)


class Notifier:
    """
    1 つの NotificationChannel を保持し、notify() をそのまま send() に委譲する。

    - チャンネルはコンストラクタでのみ設定し、差し替えはできない
    - 独自ロジックや例外処理は持たない（チャンネル側の例外はそのまま伝播する）
    """

    def __init__(self, channel: NotificationChannel) -> None:
        self._channel = channel

    @property
    def channel(self) -> NotificationChannel:
        return self._channel

    def notify(self, message: str) -> None:
        self._channel.send(message)

    def __repr__(self) -> str:
        return f"Notifier(channel={self._channel!r})"


class BroadcastNotifier:
    """
    複数の NotificationChannel に通知をファンアウトするサービス。

    1 つのチャンネルが失敗しても、残りのチャンネルには送信を続ける。
    """

    def __init__(self, channels: Iterable[NotificationChannel]) -> None:
        self._channels: List[NotificationChannel] = list(channels)

    @property
    def channels(self) -> List[NotificationChannel]:
        return list(self._channels)

    def notify(self, message: str) -> int:
        """
        受け取ったメッセージを全チャンネルに送信する。

        :return: 送信に成功したチャンネル数
        """
        delivered = 0
        for channel in self._channels:
            try:
                channel.send(message)
            except Exception:  # noqa: BLE001 - 1 チャンネルの失敗で他を止めない
                logger.exception("Notification channel failed. Continuing with others. channel=%r", channel)
                continue
            delivered += 1
        return delivered
