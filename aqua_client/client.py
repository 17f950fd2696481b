"""HTTP client for the Aqua Protocol data accounting API.

Every operation composes its URL, issues exactly one authenticated GET,
requires 200 OK and decodes the body into a frozen record. Nothing is
cached and nothing is retried; retry policy belongs to the caller, who
can tell the failure kinds apart:

- TransportError: no response at all, may be retried
- ProtocolError: non-200 status, carries the raw response
- DecodeError / FormatError: body does not match the protocol

The client only holds write-once configuration, so one instance can be
shared by concurrent tasks.

Example:
    async with AquaClient("https://pkc.example.org/rest.php", token) as client:
        info = await client.get_hash_chain_info("title", "Main Page")
        hashes = await client.get_revision_hashes(info.genesis_hash)
        revisions = await asyncio.gather(
            *(client.get_revision(h) for h in hashes)
        )
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from aqua_client.config import DEFAULT_TIMEOUT_SECONDS, ClientConfig
from aqua_client.endpoints import (
    IdType,
    hash_chain_info_path,
    join_url,
    revision_hashes_path,
    revision_path,
    server_info_path,
    validate_endpoint,
)
from aqua_client.errors import (
    ConfigError,
    DecodeError,
    FormatError,
    ProtocolError,
    TransportError,
)
from aqua_client.models import Revision, RevisionHash, RevisionInfo, ServerInfo
from aqua_client.observability import get_logger_for_service

T = TypeVar("T")

# A JSON null decodes to an empty list, as does []
_REVISION_HASHES = TypeAdapter(Optional[list[str]])


class AquaClient:
    """Client for one authenticated Aqua API session.

    Attributes:
        endpoint: Base URL of the server, without trailing slash.
        token: Bearer token sent with every request.
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        *,
        timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            endpoint: Base URL of the Aqua server.
            token: Bearer token. Its format is not validated.
            timeout: Transport-level deadline per request. None disables it.
            transport: Optional httpx transport, e.g. for proxies or tests.

        Raises:
            ConfigError: If the endpoint is not a well-formed http/https URL,
                or the token cannot be sent as an ASCII header value.
        """
        self._endpoint = validate_endpoint(endpoint)
        self._token = token
        self._log = get_logger_for_service(type(self).__name__).bind(
            endpoint=self._endpoint
        )
        try:
            self._client = httpx.AsyncClient(
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {token}",
                },
                timeout=timeout,
                transport=transport,
            )
        except UnicodeEncodeError as exc:
            raise ConfigError(
                self._endpoint, "token must contain only ASCII characters"
            ) from exc

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AquaClient":
        """Create a client from a ClientConfig."""
        return cls(
            config.endpoint,
            config.token,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._endpoint!r})"

    async def __aenter__(self) -> "AquaClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def api_url(self, path: str) -> httpx.URL:
        """Return the absolute URL of an API path under this endpoint.

        Raises:
            ConfigError: If the combined URL is malformed.
        """
        return join_url(self._endpoint, path)

    async def get_hash_chain_info(
        self, id_type: str | IdType, id: str
    ) -> RevisionInfo:
        """Fetch the context of a hash chain.

        Args:
            id_type: "genesis_hash" or "title".
            id: Genesis hash or page title, according to ``id_type``.

        Returns:
            The RevisionInfo of the chain.

        Raises:
            InvalidArgumentError: If ``id_type`` is not allowed. No request
                is made in that case.
        """
        url = self.api_url(hash_chain_info_path(id_type, id))
        response = await self._fetch(url, "RevisionInfo")
        return self._decode(
            url, response, "RevisionInfo", RevisionInfo.model_validate_json
        )

    async def get_revision_hashes(self, verification_hash: str) -> list[RevisionHash]:
        """Fetch the requested revision hash and any newer ones, in chain order.

        Args:
            verification_hash: Verification hash to start from.

        Returns:
            Revision hashes, empty when the server knows none.
        """
        url = self.api_url(revision_hashes_path(verification_hash))
        response = await self._fetch(url, "list[RevisionHash]")
        hashes = self._decode(
            url, response, "list[RevisionHash]", _REVISION_HASHES.validate_json
        )
        return [RevisionHash(h) for h in hashes or ()]

    async def get_revision(self, verification_hash: str) -> Revision:
        """Fetch a revision with all of its verification data.

        Args:
            verification_hash: Verification hash of the revision.

        Returns:
            The Revision, including optional signature and witness records.
        """
        url = self.api_url(revision_path(verification_hash))
        response = await self._fetch(url, "Revision")
        return self._decode(url, response, "Revision", Revision.model_validate_json)

    async def get_server_info(self) -> ServerInfo:
        """Fetch the server's protocol version."""
        url = self.api_url(server_info_path())
        response = await self._fetch(url, "ServerInfo")
        return self._decode(
            url, response, "ServerInfo", ServerInfo.model_validate_json
        )

    async def close(self) -> None:
        """Close HTTP client."""
        await self._client.aclose()

    async def _fetch(self, url: httpx.URL, model: str) -> httpx.Response:
        """Issue an authenticated GET and enforce the 200 OK contract.

        Raises:
            TransportError: If no response was received.
            DecodeError: If the body cannot be decoded from its content encoding.
            ProtocolError: If the status is anything but 200.
        """
        self._log.debug("aqua_request", url=str(url))
        try:
            response = await self._client.get(url)
        except httpx.DecodingError as exc:
            self._log.error(
                "aqua_decode_failed", url=str(url), model=model, error=str(exc)
            )
            raise DecodeError(model, str(url), str(exc)) from exc
        except httpx.RequestError as exc:
            detail = str(exc) or type(exc).__name__
            self._log.warning("aqua_transport_failed", url=str(url), error=detail)
            raise TransportError(str(url), detail) from exc

        if response.status_code != httpx.codes.OK:
            self._log.warning(
                "aqua_unexpected_status",
                url=str(url),
                status_code=response.status_code,
            )
            raise ProtocolError(str(url), response)
        return response

    def _decode(
        self,
        url: httpx.URL,
        response: httpx.Response,
        model: str,
        validate: Callable[[bytes], T],
    ) -> T:
        """Decode a response body, mapping failures onto the error taxonomy."""
        try:
            return validate(response.content)
        except ValidationError as exc:
            self._log.error(
                "aqua_decode_failed",
                url=str(url),
                model=model,
                error_count=exc.error_count(),
            )
            raise DecodeError(model, str(url), _summarize(exc)) from exc
        except FormatError as exc:
            self._log.error(
                "aqua_decode_failed", url=str(url), model=model, error=str(exc)
            )
            raise


def _summarize(exc: ValidationError) -> str:
    """First validation error as 'loc: message'."""
    first: dict[str, Any] = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<body>"
    return f"{loc}: {first['msg']}"
