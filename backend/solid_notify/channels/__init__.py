# backend/solid_notify/channels/__init__.py

"""
通知チャンネル用モジュール群。

「メッセージを送る」という 1 操作だけのインターフェースと、
ラベルだけが異なる Email / SMS / Push の実装を提供する。
実際の外部送信は行わず、整形した 1 行を出力するのみ。

構成イメージ:
- schemas: チャンネル種別と Email の追加項目
- service: インターフェースと実装
- factory: 種別からの生成と既定チャンネルの決定
- router: /channels エンドポイント
"""

from .factory import (
    UnknownChannelError,
    available_channels,
    build_channel,
    resolve_channel_kind,
)
from .schemas import ChannelKind, EmailOptions
from .service import (
    EmailChannel,
    Emitter,
    LabeledChannel,
    NotificationChannel,
    PushChannel,
    SMSChannel,
)

__all__ = [
    "ChannelKind",
    "EmailOptions",
    "Emitter",
    "NotificationChannel",
    "LabeledChannel",
    "EmailChannel",
    "SMSChannel",
    "PushChannel",
    "UnknownChannelError",
    "available_channels",
    "build_channel",
    "resolve_channel_kind",
]
