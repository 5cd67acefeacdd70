"""Protocols for dependency injection in the stores."""

from datetime import datetime
from typing import Protocol


class IdFactoryProtocol(Protocol):
    """Protocol for identifier generators."""

    def __call__(self) -> str:
        """Return an identifier never returned before by this factory."""
        ...


class ClockProtocol(Protocol):
    """Protocol for timestamp sources."""

    def __call__(self) -> datetime:
        """Return the current time as an aware datetime."""
        ...
