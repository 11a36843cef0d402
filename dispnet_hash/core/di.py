"""
Dependency injection helpers for dispnet_hash.

Lazy resolution with fallback to default implementations, so library
code works whether or not the container has been bootstrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface/protocol type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from dispnet_hash.core.interfaces.logger import ILogger
        >>> from dispnet_hash.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    instance = try_resolve(interface)
    if instance is not None:
        return instance
    return default_factory()


def try_resolve(interface: type[T]) -> T | None:
    """Try to resolve a service from the container.

    Returns None if the service isn't registered, rather than raising.
    """
    from .container import get_container

    return get_container().try_resolve(interface)
