"""
Application bootstrap for dispnet_hash.

Registers ambient services (logging) in the DI container from settings.
Calling it is optional; without it every module logs to a NullLogger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger

if TYPE_CHECKING:
    from .settings import DispnetSettings

_initialized = False


def bootstrap(settings: DispnetSettings | None = None, force: bool = False) -> ServiceContainer:
    """
    Bootstrap the dispnet_hash services.

    Args:
        settings: Settings to configure services from (loaded when omitted)
        force: Re-register services even if already bootstrapped

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized and not force:
        return container

    if settings is None:
        from .settings import load_settings

        settings = load_settings()

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: DispnetSettings) -> None:
    """Register core services."""
    from ..services.logging import DispnetLogger

    logging_config = settings.logging

    def create_logger() -> ILogger:
        return DispnetLogger.from_config(logging_config)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if services have been bootstrapped."""
    return _initialized
