"""Base exception class for the Aqua client."""


class AquaError(Exception):
    """Base exception for all Aqua client errors.

    Every exception raised by this package inherits from this class, so
    callers can catch the whole family in one place and still tell the
    specific kinds apart:

    - ConfigError: bad endpoint or URL composition, reconfigure
    - InvalidArgumentError: programmer error in a call argument
    - TransportError: network-level failure, may be retried
    - ProtocolError: server answered with a non-200 status
    - DecodeError / FormatError: protocol or version mismatch, permanent
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
