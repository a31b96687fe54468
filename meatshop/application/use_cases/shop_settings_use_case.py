"""
Shop Settings Use Case

The admin edits a draft copy of the settings. Nothing reaches the committed
settings, or storage, until the draft is saved.
"""

import dataclasses
import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from meatshop.domain.entities.product_entity import to_finite_float
from meatshop.domain.entities.settings_entity import ShopSettings
from meatshop.domain.repositories.settings_repository import SettingsRepository
from meatshop.infrastructure.services.image_service import file_to_data_uri
from meatshop.infrastructure.utilities.exceptions import ValidationError


class ShopSettingsUseCase:
    """Use case for the admin settings screen"""

    EDITABLE_FIELDS = frozenset(f.name for f in dataclasses.fields(ShopSettings))
    _FIELD_ADAPTERS = {f.name: TypeAdapter(f.type) for f in dataclasses.fields(ShopSettings)}

    def __init__(self, settings_repository: SettingsRepository):
        self._settings_repository = settings_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_settings(self) -> ShopSettings:
        return await self._settings_repository.get()

    async def begin_edit(self) -> ShopSettings:
        """A detached draft of the committed settings"""
        committed = await self._settings_repository.get()
        return committed.copy()

    def update_draft(self, draft: ShopSettings, **changes) -> ShopSettings:
        unknown = set(changes) - self.EDITABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown settings field: {', '.join(sorted(unknown))}", sorted(unknown)[0]
            )
        for name, value in changes.items():
            setattr(draft, name, value)
        return draft

    async def set_logo(self, draft: ShopSettings, image_path: str | Path) -> ShopSettings:
        draft.logo = await file_to_data_uri(image_path)
        return draft

    async def save(self, draft: ShopSettings) -> ShopSettings:
        """
        Commit the draft as the new settings.

        Every field must already hold its declared type. Text such as
        ``"false"`` for a flag is refused.
        """
        try:
            charge = to_finite_float(draft.default_delivery_charge, "Delivery charge")
        except ValueError as e:
            raise ValidationError(
                "Delivery charge must be a number.", "default_delivery_charge"
            ) from e
        if charge < 0:
            raise ValidationError(
                "Delivery charge cannot be negative.", "default_delivery_charge"
            )
        if not isinstance(draft.shop_name, str) or not draft.shop_name.strip():
            raise ValidationError("Shop name is required.", "shop_name")

        values = dataclasses.asdict(draft)
        values["default_delivery_charge"] = charge
        for name, adapter in self._FIELD_ADAPTERS.items():
            try:
                values[name] = adapter.validate_python(values[name], strict=True)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid value for {name}.", name) from e

        committed = ShopSettings(**values)
        await self._settings_repository.replace(committed)
        self._logger.info(
            "⚙️ SETTINGS SAVED: %s open=%s delivery=%s charge=%.2f",
            committed.shop_name,
            committed.is_open,
            committed.is_delivery_enabled,
            committed.default_delivery_charge,
        )
        return committed

    async def discard(self) -> ShopSettings:
        """Throw the draft away and start again from the committed settings"""
        self._logger.info("⚙️ Settings draft discarded")
        return await self.begin_edit()
