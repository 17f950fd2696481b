"""Errors raised while decoding response bodies."""

from __future__ import annotations

from aqua_client.errors.base import AquaError


class DecodeError(AquaError):
    """Error when a response body does not match the expected record shape.

    Indicates a protocol or version mismatch with the server. The
    underlying pydantic error is chained as ``__cause__``.

    Attributes:
        model: Name of the record that was being decoded.
        url: The URL the body came from.
    """

    def __init__(self, model: str, url: str, detail: str) -> None:
        """Initialize the error.

        Args:
            model: Name of the record that was being decoded.
            url: The URL the body came from.
            detail: Description of the mismatch.
        """
        self.model = model
        self.url = url
        super().__init__(f"Could not decode {model} from {url}: {detail}")


class FormatError(AquaError):
    """Error when a timestamp or hash string does not follow its wire format.

    Attributes:
        value: The rejected raw value.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        super().__init__(f"Malformed value {value!r}: {reason}")
