# backend/solid_notify/utils/__init__.py

"""ログ初期化などの共通ユーティリティ。"""
