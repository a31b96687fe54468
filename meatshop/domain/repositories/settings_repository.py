"""
Shop settings repository interface
"""

from abc import ABC, abstractmethod

from meatshop.domain.entities.settings_entity import ShopSettings


class SettingsRepository(ABC):
    """Repository interface for the singleton shop settings"""

    @abstractmethod
    async def get(self) -> ShopSettings:
        """Committed settings"""

    @abstractmethod
    async def replace(self, settings: ShopSettings) -> ShopSettings:
        """Swap in a whole new settings record"""
