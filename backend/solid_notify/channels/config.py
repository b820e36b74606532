# backend/solid_notify/channels/config.py

"""
通知チャンネルまわりの設定値読み出しモジュール。

- 既定チャンネル（NOTIFY_DEFAULT_CHANNEL）
- ログレベル（NOTIFY_LOG_LEVEL）

どちらも任意。未設定の場合は email / INFO を使う。
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .schemas import ChannelKind


@dataclass(frozen=True)
class NotifyConfig:
    """通知設定の値コンテナ。"""

    default_channel: ChannelKind
    log_level: str


def _read_env(name: str) -> Optional[str]:
    """
    環境変数を読み取る。未設定・空文字・空白のみの場合は None を返す。
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_env_channel(name: str, default: ChannelKind) -> ChannelKind:
    """
    チャンネル種別の環境変数を取得するヘルパー。

    不正な値が入っていた場合は RuntimeError にする。
    """
    raw = _read_env(name)
    if raw is None:
        return default

    try:
        return ChannelKind(raw.lower())
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid channel value for env var {name}: {raw!r}"
        ) from exc


def _get_env_log_level(name: str, default: str) -> str:
    raw = _read_env(name) or default
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Invalid log level for env var {name}: {raw!r}")
    return level


@lru_cache()
def get_notify_config() -> NotifyConfig:
    """
    環境変数から通知設定を読み込む。

    任意:
      - NOTIFY_DEFAULT_CHANNEL (デフォルト: email)
      - NOTIFY_LOG_LEVEL       (デフォルト: INFO)
    """
    default_channel = _get_env_channel(
        "NOTIFY_DEFAULT_CHANNEL",
        default=ChannelKind.EMAIL,
    )
    log_level = _get_env_log_level("NOTIFY_LOG_LEVEL", default="INFO")

    return NotifyConfig(
        default_channel=default_channel,
        log_level=log_level,
    )
