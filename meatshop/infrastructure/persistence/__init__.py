"""
Persistence: the owned application state and its JSON snapshot store
"""

from .app_state import AppState
from .json_store import JsonStateStore, managed_snapshot

__all__ = ["AppState", "JsonStateStore", "managed_snapshot"]
