"""Errors raised by the HTTP exchange with the Aqua server."""

from __future__ import annotations

import httpx

from aqua_client.errors.base import AquaError


class TransportError(AquaError):
    """Error when the request never produced an HTTP response.

    Covers refused connections, timeouts and TLS failures. The underlying
    httpx exception is chained as ``__cause__``. Callers may retry.

    Attributes:
        url: The URL that was being requested.
    """

    def __init__(self, url: str, detail: str) -> None:
        """Initialize the error.

        Args:
            url: The URL that was being requested.
            detail: Description of the transport failure.
        """
        self.url = url
        super().__init__(f"Request to {url} failed: {detail}")


class ProtocolError(AquaError):
    """Error when the server answers with a status other than 200 OK.

    The raw response is kept for diagnostics. Not retried.

    Attributes:
        status_code: HTTP status returned by the server.
        response: The raw httpx response.
        url: The URL that was requested.
    """

    def __init__(self, url: str, response: httpx.Response) -> None:
        """Initialize the error.

        Args:
            url: The URL that was requested.
            response: The raw httpx response.
        """
        self.url = url
        self.response = response
        self.status_code = response.status_code
        super().__init__(
            f"Request to {url} returned {response.status_code}, expected 200 OK"
        )
