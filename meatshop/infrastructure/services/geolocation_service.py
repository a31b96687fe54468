"""
Location capture for checkout

A single-shot position lookup with a hard timeout. Any failure is reported
as a GeolocationError and the caller carries on without a location.
"""

import asyncio
import logging

import httpx

from meatshop.infrastructure.services.link_service import coordinates_link
from meatshop.infrastructure.utilities.exceptions import GeolocationError

logger = logging.getLogger(__name__)


class GeolocationService:
    """Resolves the device position into a map link"""

    def __init__(
        self,
        lookup_url: str = "",
        timeout_seconds: float = 8.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._lookup_url = lookup_url
        self._timeout = timeout_seconds
        self._client = client

    @property
    def is_supported(self) -> bool:
        return bool(self._lookup_url)

    async def locate(self) -> str:
        """Return a maps link for the current position"""
        if not self.is_supported:
            raise GeolocationError(GeolocationError.UNSUPPORTED)

        try:
            latitude, longitude = await asyncio.wait_for(
                self._fetch_coordinates(), timeout=self._timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error("GPS Error: lookup timed out after %.1fs", self._timeout)
            raise GeolocationError(GeolocationError.TIMEOUT) from e
        except httpx.HTTPStatusError as e:
            logger.error("GPS Error: %s", e)
            if e.response.status_code in (401, 403):
                raise GeolocationError(GeolocationError.PERMISSION_DENIED, str(e)) from e
            raise GeolocationError(GeolocationError.UNAVAILABLE, str(e)) from e
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("GPS Error: %s", e)
            raise GeolocationError(GeolocationError.UNAVAILABLE, str(e)) from e

        link = coordinates_link(latitude, longitude)
        logger.info("Location captured: %s", link)
        return link

    async def _fetch_coordinates(self) -> tuple[float, float]:
        if self._client is not None:
            return self._parse(await self._client.get(self._lookup_url))

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return self._parse(await client.get(self._lookup_url))

    @staticmethod
    def _parse(response: httpx.Response) -> tuple[float, float]:
        response.raise_for_status()
        payload = response.json()
        return float(payload["latitude"]), float(payload["longitude"])
