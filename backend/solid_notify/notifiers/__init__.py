# backend/solid_notify/notifiers/__init__.py

"""
通知チャンネルを「保持して使う」側のモジュール群。

- service: Notifier（1 チャンネルを所有）と BroadcastNotifier（複数チャンネルへ配信）
- router: /broadcast エンドポイント
"""

from .service import BroadcastNotifier, Notifier

__all__ = ["Notifier", "BroadcastNotifier"]
