"""Dependency injection container for services."""

from dependency_injector import containers, providers

from firmware_descriptor.config import Settings
from firmware_descriptor.services.firmware_api_client import FirmwareApiClient
from firmware_descriptor.services.recency_service import RecencyService


class ServiceContainer(containers.DeclarativeContainer):
    """Container for service dependency injection."""

    # Configuration providers
    config = providers.Dependency(instance_of=Settings)

    # Remote firmware service client - one pooled HTTP client per process
    firmware_api_client = providers.Singleton(FirmwareApiClient, settings=config)

    # Recency list - mutable, so a new instance per caller
    recency_service = providers.Factory(
        RecencyService,
        max_records=config.provided.MAX_RECENT_FIRMWARES,
    )
