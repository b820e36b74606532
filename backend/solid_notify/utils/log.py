# backend/solid_notify/utils/log.py

"""
ログ出力の初期化ヘルパー。

各モジュールは logging.getLogger(__name__) を使うだけにして、
ハンドラやフォーマットの設定はアプリケーション起動時にここで一度だけ行う。
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    ルートロガーに基本ハンドラを設定し、ログレベルを反映する。

    既にハンドラが登録済み（uvicorn / pytest 配下など）の場合はハンドラを追加せず、
    ルートロガーのレベルだけを設定する。
    """
    level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
