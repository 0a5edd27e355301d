"""
Dependency injection container using dependency-injector.
Holds the application-scoped objects: cache, payment provider, health controller.
"""

from dependency_injector import containers, providers

from app.core.cache import AppCache
from app.core.config import settings
from app.core.integrations.payments.stripe_client import StripePaymentClient
from app.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Application cache, one per running app
    app_cache = providers.Singleton(
        AppCache,
        ttl_seconds=config.cache_ttl_seconds.as_int(),
    )

    # External payment provider
    payment_provider = providers.Singleton(
        StripePaymentClient,
        secret_key=config.stripe_secret_key,
        api_base=config.stripe_api_base,
        currency=config.payment_currency,
    )

    # Controllers, built per request with the request session
    health_controller = providers.Factory(
        HealthController,
    )


def build_container() -> Container:
    """Create a container configured from application settings."""
    container = Container()
    container.config.from_dict({
        "database_url": settings.DATABASE_URL,
        "cache_ttl_seconds": settings.CACHE_TTL_SECONDS,
        "stripe_secret_key": settings.STRIPE_SECRET_KEY,
        "stripe_api_base": settings.STRIPE_API_BASE,
        "payment_currency": settings.PAYMENT_CURRENCY,
    })
    return container


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = build_container()
    return _container
