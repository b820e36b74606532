# backend/solid_notify/users/schemas.py

"""
ユーザーのスキーマ定義。

User は表示名だけを持ち、チャンネルは保持しない。
通知のたびに呼び出し側からチャンネルを受け取って使う（アソシエーション）。
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from solid_notify.channels.schemas import ChannelKind
from solid_notify.channels.service import NotificationChannel


class User(BaseModel):
    """表示名だけを持つユーザー。"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="表示名。通知本文の 'To <name>: ' に使う。")

    def format_message(self, message: str) -> str:
        return f"To {self.name}: {message}"

    def notify(self, channel: NotificationChannel, message: str) -> None:
        """
        受け取ったチャンネルで、宛名を付けたメッセージを送信する。

        チャンネルは引数で受け取るだけで、User 側には保存しない。
        """
        channel.send(self.format_message(message))


class UserNotifyRequest(BaseModel):
    """POST /users/notify のリクエストボディ。"""

    name: str = Field(..., description="ユーザーの表示名")
    channel: Optional[ChannelKind] = Field(
        None,
        description="送信に使うチャンネル。省略時は NOTIFY_DEFAULT_CHANNEL の値。",
    )
    message: str = Field(..., description="送信するメッセージ本文")
