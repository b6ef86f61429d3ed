from __future__ import annotations

"""Exception types raised by the ramp engine.

The core never logs; every error carries enough context (entity name,
expected vs. actual counts) for the caller to report it.
"""


class RampError(Exception):
    """Base class for all ramp engine errors."""


class ConfigurationError(RampError, ValueError):
    """A ColorDefinition or StepSchedule is malformed."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"{name}: {message}")


class SerializationError(RampError, ValueError):
    """A ramp handed to an exporter does not match its schedule."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{name}: ramp has {actual} entries, schedule expects {expected}"
        )


class DeliveryError(RampError, RuntimeError):
    """Every delivery channel failed for an export document."""

    def __init__(self, filename: str, channels: list[str]) -> None:
        self.filename = filename
        self.channels = list(channels)
        tried = ", ".join(channels) if channels else "none"
        super().__init__(f"could not deliver {filename} (tried: {tried})")


__all__ = ["RampError", "ConfigurationError", "SerializationError", "DeliveryError"]
