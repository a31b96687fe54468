"""
Login Use Case

Sign-in is simulated: the identifier is accepted as typed and only decides
which view the user gets. There is no credential check.
"""

import asyncio
import logging
from dataclasses import dataclass

from meatshop.domain.entities.settings_entity import UserRole
from meatshop.domain.repositories.settings_repository import SettingsRepository
from meatshop.infrastructure.utilities.exceptions import ValidationError


@dataclass
class LoginResult:
    identity: str
    role: UserRole


class LoginUseCase:
    """Use case for email and phone sign-in"""

    def __init__(self, settings_repository: SettingsRepository, otp_delay_seconds: float = 1.0):
        self._settings_repository = settings_repository
        self._otp_delay_seconds = otp_delay_seconds
        self._logger = logging.getLogger(self.__class__.__name__)

    async def login_with_email(self, email: str) -> LoginResult:
        identity = (email or "").strip()
        if not identity:
            raise ValidationError("Please enter your email.", "email")
        return await self._classify(identity)

    async def request_otp(self, phone: str) -> bool:
        """Pretend to send a code"""
        if not (phone or "").strip():
            raise ValidationError("Please enter your phone number.", "phone")
        await asyncio.sleep(self._otp_delay_seconds)
        self._logger.info("📱 OTP sent to %s (simulated)", phone.strip())
        return True

    async def verify_otp(self, phone: str, code: str) -> LoginResult:
        """Any non-empty code is accepted"""
        identity = (phone or "").strip()
        if not identity:
            raise ValidationError("Please enter your phone number.", "phone")
        if not (code or "").strip():
            raise ValidationError("Please enter the code we sent you.", "code")
        return await self._classify(identity)

    async def _classify(self, identity: str) -> LoginResult:
        settings = await self._settings_repository.get()
        role = settings.classify(identity)
        self._logger.info("🔑 LOGIN: %s as %s", identity, role.value)
        return LoginResult(identity=identity, role=role)
