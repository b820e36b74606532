# backend/solid_notify/users/router.py

from typing import List

from fastapi import APIRouter

from solid_notify.channels.factory import build_channel, resolve_channel_kind
from solid_notify.channels.schemas import EmittedResponse

from .schemas import User, UserNotifyRequest

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/notify",
    response_model=EmittedResponse,
    summary="ユーザー宛の通知",
    description=(
        "ユーザーの表示名を付けたメッセージを、指定チャンネルで送信する。"
        "channel を省略した場合は NOTIFY_DEFAULT_CHANNEL のチャンネルを使う。"
    ),
)
def notify_user(request: UserNotifyRequest) -> EmittedResponse:
    emitted: List[str] = []
    kind = resolve_channel_kind(request.channel)
    user = User(name=request.name)
    user.notify(build_channel(kind, emit=emitted.append), request.message)
    return EmittedResponse(channels=[kind], emitted=emitted)
