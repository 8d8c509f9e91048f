"""
Domain errors raised by the simulation core.
"""

from typing import Any


class SimulationError(Exception):
    """Base class for simulation errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(SimulationError, KeyError):
    """Raised when a product or customer id has no stored state."""

    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} '{key}' not found", {"entity": entity, "key": key})

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


class UnknownStreamError(SimulationError, ValueError):
    """Raised when a stream name is outside the enumerated set."""

    def __init__(self, stream: Any):
        super().__init__(f"Unknown metric stream: {stream!r}", {"stream": stream})
