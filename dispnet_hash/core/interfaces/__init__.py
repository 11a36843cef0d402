"""Abstract interfaces for pluggable services."""

from .logger import ILogger

__all__ = ["ILogger"]
