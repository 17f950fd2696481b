"""Errors raised while configuring the client or validating call arguments."""

from __future__ import annotations

from collections.abc import Iterable

from aqua_client.errors.base import AquaError


class ConfigError(AquaError):
    """Error when the client configuration is unusable.

    Raised at construction time for an unparseable base endpoint, a token
    that cannot be sent as a header or a non-positive timeout, and at call
    time when a request URL cannot be composed.

    Attributes:
        endpoint: The endpoint or URL that failed validation.
        reason: Why it was rejected.
    """

    def __init__(self, endpoint: str, reason: str) -> None:
        """Initialize the error.

        Args:
            endpoint: The endpoint or URL that failed validation.
            reason: Why it was rejected.
        """
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Invalid configuration for {endpoint!r}: {reason}")


class InvalidArgumentError(AquaError):
    """Error when a call argument is outside its allowed set of values.

    Raised before any network access occurs.

    Attributes:
        argument: Name of the offending argument.
        value: The value that was passed.
        allowed: The values that would have been accepted.
    """

    def __init__(self, argument: str, value: object, allowed: Iterable[str]) -> None:
        self.argument = argument
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"{argument} must be one of {', '.join(self.allowed)}, got {value!r}"
        )
