# backend/solid_notify/__init__.py
"""
solid-notify application package.

This package contains:
- channels: the "send a message" contract and its Email / SMS / Push variants
- notifiers: composition (Notifier) and fan-out (BroadcastNotifier)
- users: association (User receives a channel per call)
- main: FastAPI application entrypoint
"""
