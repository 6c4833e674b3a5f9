"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator

import pytest

from firmware_descriptor.config import Settings
from firmware_descriptor.models.firmware import Firmware
from firmware_descriptor.services.container import ServiceContainer

TEST_API_URL = "https://firmware.example.com/api"


def _build_test_settings(**overrides: object) -> Settings:
    """Construct Settings for tests without reading the environment or .env."""
    values: dict[str, object] = {
        "FIRMWARE_API_URL": TEST_API_URL,
        "HTTP_TIMEOUT_SECONDS": 5.0,
        "MAX_RECENT_FIRMWARES": 3,
        "LOG_LEVEL": "DEBUG",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[arg-type]


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a fake firmware service."""
    return _build_test_settings()


@pytest.fixture
def container(test_settings: Settings) -> Generator[ServiceContainer, None, None]:
    """Service container wired with test settings."""
    container = ServiceContainer(config=test_settings)
    yield container
    container.firmware_api_client().close()


def create_test_firmware(
    serial_number: str = "SN-0001",
    size: int = 512 * 1024,
    compile_time: str = "2024-03-01T12:00:00Z",
    edition: str = "PLUS",
    version: str = "1.2.3",
) -> Firmware:
    """Assemble a valid Firmware, failing the test if assembly is rejected."""
    firmware = Firmware.assemble(serial_number, size, compile_time, edition, version)
    assert firmware is not None
    return firmware


@pytest.fixture
def make_firmware() -> Callable[..., Firmware]:
    """Factory for valid firmware descriptors with overridable fields."""
    return create_test_firmware


@pytest.fixture
def firmware() -> Firmware:
    """A valid firmware descriptor."""
    return create_test_firmware()
