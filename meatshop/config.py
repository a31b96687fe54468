"""
Configuration management for the meat shop storefront
"""


import threading
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEATSHOP_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    environment: str = Field(default="development", description="Application environment")
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for log files")

    # Local storage
    data_dir: str = Field(default="data", description="Directory holding the store snapshot")
    storage_key: str = Field(
        default="sb_store_v3", description="Storage key, also the snapshot file name", min_length=1
    )

    # Display and outbound links
    currency_symbol: str = Field(default="₹", description="Currency symbol for display")
    whatsapp_country_code: str = Field(
        default="91", description="Prefix for 10-digit local numbers in WhatsApp links"
    )

    # Device capabilities
    geolocation_url: str = Field(
        default="", description="Position lookup endpoint; empty disables location capture"
    )
    geolocation_timeout_seconds: float = Field(
        default=8.0, description="Give up on location capture after this many seconds", gt=0
    )
    otp_delay_seconds: float = Field(
        default=1.0, description="Simulated OTP send delay", ge=0
    )

    @property
    def store_path(self) -> Path:
        """Full path of the persisted snapshot file"""
        return Path(self.data_dir) / f"{self.storage_key}.json"


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
