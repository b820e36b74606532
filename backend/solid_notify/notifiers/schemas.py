# backend/solid_notify/notifiers/schemas.py

"""
/broadcast 用の Pydantic スキーマ定義。
"""

from typing import List

from pydantic import BaseModel, Field

from solid_notify.channels.schemas import ChannelKind, EmittedResponse


class BroadcastRequest(BaseModel):
    """
    POST /broadcast のリクエストボディ。

    channels の順番どおりに送信する。重複指定はそのまま 2 回送信する。
    """

    message: str = Field(..., description="送信するメッセージ本文")
    channels: List[ChannelKind] = Field(
        ...,
        description="送信先チャンネルの一覧（email / sms / push）。",
    )


class BroadcastResponse(EmittedResponse):
    """
    POST /broadcast のレスポンス。

    delivered は送信に成功したチャンネル数。失敗したチャンネルの行は emitted に含まれない。
    """

    delivered: int = Field(..., ge=0, description="送信に成功したチャンネル数")
