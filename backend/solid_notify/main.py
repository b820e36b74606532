# backend/solid_notify/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /channels エンドポイント（チャンネル一覧・単一チャンネル送信）を公開する
- /users/notify エンドポイント（ユーザー宛送信）を公開する
- /broadcast エンドポイント（複数チャンネル送信）を公開する
"""

from fastapi import FastAPI

from solid_notify.channels.config import get_notify_config
from solid_notify.channels.router import router as channels_router
from solid_notify.notifiers.router import router as notifiers_router
from solid_notify.users.router import router as users_router
from solid_notify.utils.log import configure_logging


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - チャンネルエンドポイント (/channels, /channels/{kind}/send)
    - ユーザー通知エンドポイント (/users/notify)
    - 一斉送信エンドポイント (/broadcast)
    - ヘルスチェックエンドポイント (/health)
    """
    config = get_notify_config()
    configure_logging(config.log_level)

    app = FastAPI(title="solid-notify")

    # ルーター登録
    app.include_router(channels_router)
    app.include_router(users_router)
    app.include_router(notifiers_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
