# backend/solid_notify/channels/router.py
"""
通知チャンネル用の FastAPI ルーター定義。

- GET  /channels
- POST /channels/{kind}/send
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError

from .factory import UnknownChannelError, available_channels, build_channel, channel_type
from .schemas import (
    ChannelInfo,
    ChannelListResponse,
    ChannelSendRequest,
    EmailOptions,
    EmittedResponse,
)
from .service import EmailChannel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/channels", tags=["channels"])


@router.get(
    "",
    response_model=ChannelListResponse,
    summary="利用可能なチャンネル一覧",
)
def list_channels() -> ChannelListResponse:
    channels = [
        ChannelInfo(kind=kind, label=channel_type(kind).label)
        for kind in available_channels()
    ]
    return ChannelListResponse(channels=channels, count=len(channels))


@router.post(
    "/{kind}/send",
    response_model=EmittedResponse,
    summary="指定チャンネルでメッセージを送信",
    description=(
        "指定チャンネルでメッセージを整形し、出力された行を返す。"
        "recipient / subject は email チャンネルのみ受け付ける。"
    ),
)
def send_message(kind: str, request: ChannelSendRequest) -> EmittedResponse:
    """
    1 チャンネルでメッセージを送信するエンドポイント。

    - 未知のチャンネル: 404
    - email 以外で recipient / subject を指定: 422
    - 宛先なしで件名を指定 / 空の宛先: 422
    - 送信中の予期しない例外: 500
    """
    emitted: List[str] = []
    try:
        channel = build_channel(kind, emit=emitted.append)
    except UnknownChannelError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    options: Optional[EmailOptions] = None
    has_options = request.recipient is not None or request.subject is not None
    if not isinstance(channel, EmailChannel):
        if has_options:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Channel '{channel.kind.value}' does not accept recipient or subject.",
            )
    else:
        try:
            options = EmailOptions(recipient=request.recipient, subject=request.subject)
        except ValidationError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="recipient must be non-empty and is required when subject is set.",
            ) from exc

    try:
        if options is None:
            channel.send(request.message)
        else:
            channel.send(request.message, options)
    except Exception as exc:  # noqa: BLE001
        # 予期しない例外は 500 としてクライアントに返す（詳細はログ側で確認）
        logger.exception("Channel send failed. channel=%s", channel.kind.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send notification.",
        ) from exc

    logger.info("Message sent via /channels. channel=%s lines=%d", channel.kind.value, len(emitted))
    return EmittedResponse(channels=[channel.kind], emitted=emitted)
