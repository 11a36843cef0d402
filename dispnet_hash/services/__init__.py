"""Service implementations for dispnet_hash."""

from .logging import DispnetLogger, NullLogger

__all__ = ["DispnetLogger", "NullLogger"]
