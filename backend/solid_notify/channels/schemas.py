# backend/solid_notify/channels/schemas.py

"""
通知チャンネルまわりのスキーマ定義。

- ChannelKind: チャンネル種別（Email / SMS / Push）
- EmailOptions: Email チャンネルだけが受け付ける追加項目（宛先・件名）
- /channels 系エンドポイントのリクエスト / レスポンス
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ChannelKind(str, Enum):
    """
    通知チャンネルの種別。

    値は API のパスやリクエストボディ、環境変数でそのまま使う。
    """

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class EmailOptions(BaseModel):
    """
    Email 送信時の任意項目。

    send() をオーバーロードする代わりに、追加の引数はこのモデルにまとめて渡す。
    件名は「宛先付きの出力」の一部としてのみ意味を持つため、宛先なしの件名は不可。
    空文字（空白のみ含む）の宛先も不可。
    """

    model_config = ConfigDict(frozen=True)

    recipient: Optional[str] = Field(
        None,
        description="宛先メールアドレス。指定時は 'Email to <recipient>' 形式で出力する。",
    )
    subject: Optional[str] = Field(
        None,
        description="件名。recipient と併せて指定した場合のみ有効。",
    )

    @model_validator(mode="after")
    def _subject_requires_recipient(self) -> "EmailOptions":
        if self.recipient is not None and not self.recipient.strip():
            raise ValueError("recipient must not be empty")
        if self.subject is not None and self.recipient is None:
            raise ValueError("subject requires a recipient")
        return self


class ChannelInfo(BaseModel):
    """GET /channels の 1 要素。"""

    kind: ChannelKind = Field(..., description="チャンネル種別")
    label: str = Field(..., description="出力時の接頭辞（Email / SMS / Push）")


class ChannelListResponse(BaseModel):
    channels: List[ChannelInfo]
    count: int


class ChannelSendRequest(BaseModel):
    """
    POST /channels/{kind}/send のリクエストボディ。

    recipient / subject は Email チャンネルのみ受け付ける。
    """

    message: str = Field(..., description="送信するメッセージ本文（空文字も可）")
    recipient: Optional[str] = Field(None, description="Email のみ: 宛先")
    subject: Optional[str] = Field(None, description="Email のみ: 件名")


class EmittedResponse(BaseModel):
    """
    送信系エンドポイント共通のレスポンス。

    emitted には各チャンネルが出力した行を出力順に格納する。
    """

    channels: List[ChannelKind] = Field(..., description="出力に使ったチャンネル")
    emitted: List[str] = Field(default_factory=list, description="出力された行")
