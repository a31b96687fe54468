"""
Snapshot-backed implementation of SettingsRepository
"""

import logging

from meatshop.domain.entities.settings_entity import ShopSettings
from meatshop.domain.repositories.settings_repository import SettingsRepository
from meatshop.infrastructure.persistence.app_state import AppState
from meatshop.infrastructure.persistence.json_store import JsonStateStore, managed_snapshot


class JsonSettingsRepository(SettingsRepository):
    """Shop settings stored in the application state snapshot"""

    def __init__(self, state: AppState, store: JsonStateStore):
        self._state = state
        self._store = store
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get(self) -> ShopSettings:
        return self._state.settings

    async def replace(self, settings: ShopSettings) -> ShopSettings:
        with managed_snapshot(self._store, self._state) as state:
            state.settings = settings
        self._logger.info("Shop settings replaced")
        return settings
