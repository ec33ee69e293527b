from __future__ import annotations

from dataclasses import dataclass


class BadgeServiceError(RuntimeError):
    """Base exception for badge service failures."""

    pretty_message = "inaccessible"


class TransportError(BadgeServiceError):
    """Network failures, non-2xx responses and bodies that are not JSON."""

    pretty_message = "inaccessible"


class NotFoundError(TransportError):
    """Upstream reported that the package or slug does not exist."""

    pretty_message = "not found"


class RateLimitedError(TransportError):
    """Upstream throttled the request (HTTP 429)."""

    pretty_message = "rate limited by upstream service"


@dataclass(eq=False)
class SchemaValidationError(BadgeServiceError):
    """Upstream JSON did not match the expected schema."""

    message: str
    context: dict[str, object] | None = None

    pretty_message = "invalid"

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class ConfigurationGapError(LookupError):
    """An interval accepted by routing has no entry in the interval table."""
