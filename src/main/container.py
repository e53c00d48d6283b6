"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.infrastructure.config import SettingsConfigReader
from src.infrastructure.database import SqlDatabase
from src.infrastructure.gateways import (
    PayPalGateway,
    StripeGateway,
    resolve_paypal_base_url,
)
from src.infrastructure.runtime import PsutilProcessRuntime
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.health_probes import (
    EmailConfigurationProbe,
    PaymentProviderProbe,
    PaymentsProbe,
    ResourceProbe,
    StorageProbe,
)
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    sql_database = providers.Singleton(
        SqlDatabase,
        database_url=config.database.url,
        pool_size=config.database.pool_size,
        connect_timeout=config.database.connect_timeout,
    )

    config_reader = providers.Singleton(SettingsConfigReader, settings=config)

    process_runtime = providers.Singleton(PsutilProcessRuntime)

    # Gateways
    stripe_gateway = providers.Singleton(
        StripeGateway,
        base_url=config.stripe.api_url,
    )

    paypal_gateway = providers.Singleton(
        PayPalGateway,
        base_url=providers.Callable(
            resolve_paypal_base_url,
            config.paypal.mode,
            config.paypal.base_url,
        ),
    )

    # Health probes
    storage_probe = providers.Singleton(
        StorageProbe,
        storage=sql_database,
        timeout_ms=config.health.database_timeout_ms,
    )

    stripe_probe = providers.Singleton(
        PaymentProviderProbe,
        gateway=stripe_gateway,
        config_reader=config_reader,
        timeout_ms=config.health.payment_timeout_ms,
    )

    paypal_probe = providers.Singleton(
        PaymentProviderProbe,
        gateway=paypal_gateway,
        config_reader=config_reader,
        timeout_ms=config.health.payment_timeout_ms,
    )

    payments_probe = providers.Singleton(
        PaymentsProbe,
        providers=providers.List(stripe_probe, paypal_probe),
    )

    email_probe = providers.Singleton(
        EmailConfigurationProbe,
        config_reader=config_reader,
    )

    resource_probe = providers.Singleton(
        ResourceProbe,
        runtime=process_runtime,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        storage_probe=storage_probe,
        payments_probe=payments_probe,
        email_probe=email_probe,
        resource_probe=resource_probe,
    )

    # Application (use cases)
    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The database engine connects lazily, so startup never blocks on the
    store being reachable; the health endpoint reports that instead.
    """
    container = get_container()
    sql_database = container.sql_database()

    try:
        logger.info("container.database.ready", backend=sql_database.backend)
        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.database.close")
        sql_database.close()
        logger.info("container.resources.shutdown")
