# backend/solid_notify/users/__init__.py

"""
ユーザー（通知の受け手）用モジュール群。

- schemas: User モデル（チャンネルは呼び出しごとに受け取る）
- router: /users/notify エンドポイント
"""

from .schemas import User

__all__ = ["User"]
