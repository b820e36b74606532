# backend/solid_notify/channels/factory.py

"""
通知チャンネルの簡易ファクトリ。

- ChannelKind（または文字列）から対応するチャンネルを生成する
- 種別が省略された場合は設定 NOTIFY_DEFAULT_CHANNEL の値を使う
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type, Union

from .config import get_notify_config
from .schemas import ChannelKind
from .service import EmailChannel, Emitter, LabeledChannel, PushChannel, SMSChannel

_CHANNEL_TYPES: Dict[ChannelKind, Type[LabeledChannel]] = {
    ChannelKind.EMAIL: EmailChannel,
    ChannelKind.SMS: SMSChannel,
    ChannelKind.PUSH: PushChannel,
}


class UnknownChannelError(ValueError):
    """未知のチャンネル種別が指定された場合に投げる例外。"""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown notification channel: {kind!r}")
        self.kind = kind


def parse_channel_kind(kind: Union[ChannelKind, str]) -> ChannelKind:
    """
    ChannelKind または文字列（大文字小文字は区別しない）を ChannelKind に変換する。
    """
    if isinstance(kind, ChannelKind):
        return kind
    try:
        return ChannelKind(str(kind).strip().lower())
    except ValueError as exc:
        raise UnknownChannelError(kind) from exc


def channel_type(kind: Union[ChannelKind, str]) -> Type[LabeledChannel]:
    return _CHANNEL_TYPES[parse_channel_kind(kind)]


def build_channel(
    kind: Union[ChannelKind, str],
    *,
    emit: Optional[Emitter] = None,
) -> LabeledChannel:
    """
    指定種別のチャンネルを新しく生成して返す。

    :param kind: チャンネル種別
    :param emit: 出力先。None の場合は標準出力
    """
    return channel_type(kind)(emit=emit)


def available_channels() -> List[ChannelKind]:
    """登録済みのチャンネル種別を定義順に返す。"""
    return list(_CHANNEL_TYPES)


def resolve_channel_kind(kind: Optional[Union[ChannelKind, str]] = None) -> ChannelKind:
    """
    チャンネル種別を決定する。

    kind が None の場合は設定 NOTIFY_DEFAULT_CHANNEL の値を使う。
    """
    if kind is None:
        return get_notify_config().default_channel
    return parse_channel_kind(kind)
