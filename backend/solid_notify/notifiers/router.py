# backend/solid_notify/notifiers/router.py

from typing import List

from fastapi import APIRouter

from solid_notify.channels.factory import build_channel

from .schemas import BroadcastRequest, BroadcastResponse
from .service import BroadcastNotifier

router = APIRouter(tags=["notifiers"])


@router.post(
    "/broadcast",
    response_model=BroadcastResponse,
    summary="複数チャンネルへの一斉送信",
    description=(
        "指定したチャンネルの順番で同じメッセージを送信し、出力された行と成功数を返す。"
        "失敗したチャンネルはスキップし、残りのチャンネルへの送信を続ける。"
    ),
)
def broadcast(request: BroadcastRequest) -> BroadcastResponse:
    emitted: List[str] = []
    notifier = BroadcastNotifier(
        build_channel(kind, emit=emitted.append) for kind in request.channels
    )
    delivered = notifier.notify(request.message)
    return BroadcastResponse(channels=request.channels, emitted=emitted, delivered=delivered)
