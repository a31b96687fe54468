"""
Test configuration and fixtures for the meat shop storefront
"""

import os
from unittest.mock import patch

import pytest
from faker import Faker

from meatshop.application.dtos.order_dtos import CheckoutRequest
from meatshop.config import Settings, reset_config
from meatshop.domain.entities.cart_entity import Cart
from meatshop.infrastructure.container.dependency_injection import DependencyContainer
from meatshop.infrastructure.persistence.app_state import AppState
from meatshop.infrastructure.persistence.json_store import JsonStateStore
from meatshop.infrastructure.services.geolocation_service import GeolocationService


@pytest.fixture(autouse=True)
def mock_env(tmp_path):
    """Isolate every test from the real environment and storage"""
    test_env = {
        "MEATSHOP_ENVIRONMENT": "test",
        "MEATSHOP_LOG_LEVEL": "DEBUG",
        "MEATSHOP_DATA_DIR": str(tmp_path / "data"),
        "MEATSHOP_LOG_DIR": str(tmp_path / "logs"),
        "MEATSHOP_OTP_DELAY_SECONDS": "0",
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        yield test_env
    reset_config()


@pytest.fixture
def config(tmp_path):
    return Settings(_env_file=None, data_dir=str(tmp_path / "data"), otp_delay_seconds=0)


@pytest.fixture
def store(config):
    return JsonStateStore(config.store_path)


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def container(config, store):
    return DependencyContainer(
        config=config, store=store, geolocation_service=GeolocationService()
    )


@pytest.fixture
def fake():
    faker = Faker(["en_IN"])
    Faker.seed(4321)
    return faker


@pytest.fixture
def checkout_request(fake):
    """Filled-in delivery form for a fake customer"""
    return CheckoutRequest(
        customer_name=fake.name(),
        phone="9876543210",
        address=fake.address().replace("\n", ", "),
    )


@pytest.fixture
def cart():
    return Cart()
