"""Endpoint composition for the Aqua Protocol data accounting API.

Maps each logical operation to its URL path and joins paths with the
configured base endpoint. Caller-supplied values become single,
percent-encoded path segments, so an id can never add or climb path
segments.

Usage:
    base = validate_endpoint("https://pkc.example.org/rest.php")
    url = join_url(base, hash_chain_info_path("title", "Main Page"))
    # https://pkc.example.org/rest.php/data_accounting/get_hash_chain_info/title/Main%20Page
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

import httpx

from aqua_client.errors import ConfigError, InvalidArgumentError

GET_HASH_CHAIN_INFO = "/data_accounting/get_hash_chain_info/"
GET_REVISION_HASHES = "/data_accounting/get_revision_hashes/"
GET_REVISION = "/data_accounting/get_revision/"
GET_SERVER_INFO = "/data_accounting/get_server_info"

_ALLOWED_SCHEMES = ("http", "https")
_DOT_SEGMENTS = (".", "..")


class IdType(str, Enum):
    """How a hash chain is looked up in ``get_hash_chain_info``.

    Values:
        GENESIS_HASH: By the verification hash of its first revision.
        TITLE: By page title.
    """

    GENESIS_HASH = "genesis_hash"
    TITLE = "title"


def validate_endpoint(endpoint: str) -> str:
    """Check that an endpoint is a well-formed absolute HTTP(S) URL.

    Reachability is not checked.

    Args:
        endpoint: Base URL of the Aqua server.

    Returns:
        The endpoint with any trailing slash removed.

    Raises:
        ConfigError: If the endpoint cannot be parsed or is not an
            absolute http/https URL with a host.
    """
    if not isinstance(endpoint, str) or not endpoint.strip():
        raise ConfigError(str(endpoint), "endpoint must be a non-empty string")

    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise ConfigError(endpoint, str(exc)) from exc

    if url.scheme not in _ALLOWED_SCHEMES:
        raise ConfigError(endpoint, "scheme must be http or https")
    if not url.host:
        raise ConfigError(endpoint, "endpoint has no host")
    if url.query or url.fragment:
        raise ConfigError(endpoint, "endpoint must not carry a query or fragment")

    return endpoint.rstrip("/")


def join_url(base: str, path: str) -> httpx.URL:
    """Join a validated base endpoint with an operation path.

    Raises:
        ConfigError: If the combined string is not a valid URL.
    """
    combined = base + path
    try:
        return httpx.URL(combined)
    except httpx.InvalidURL as exc:
        raise ConfigError(combined, str(exc)) from exc


def path_segment(value: str, name: str) -> str:
    """Percent-encode a caller-supplied value as one path segment.

    Args:
        value: The raw value, e.g. a verification hash or page title.
        name: Argument name used in error messages.

    Raises:
        ConfigError: If the value is empty or a dot segment.
    """
    if not isinstance(value, str) or value in ("", *_DOT_SEGMENTS):
        raise ConfigError(str(value), f"{name} is not a valid path segment")
    return quote(value, safe="")


def coerce_id_type(id_type: str | IdType) -> IdType:
    """Resolve an id type, rejecting anything outside ``IdType``.

    Raises:
        InvalidArgumentError: If ``id_type`` is neither "genesis_hash" nor "title".
    """
    try:
        return IdType(id_type)
    except ValueError as exc:
        raise InvalidArgumentError(
            "id_type", id_type, [member.value for member in IdType]
        ) from exc


def hash_chain_info_path(id_type: str | IdType, id: str) -> str:
    """Path of ``get_hash_chain_info`` for a chain looked up by ``id_type``."""
    resolved = coerce_id_type(id_type)
    return f"{GET_HASH_CHAIN_INFO}{resolved.value}/{path_segment(id, 'id')}"


def revision_hashes_path(verification_hash: str) -> str:
    """Path of ``get_revision_hashes`` for a verification hash."""
    return GET_REVISION_HASHES + path_segment(verification_hash, "verification_hash")


def revision_path(verification_hash: str) -> str:
    """Path of ``get_revision`` for a verification hash."""
    return GET_REVISION + path_segment(verification_hash, "verification_hash")


def server_info_path() -> str:
    """Path of ``get_server_info``."""
    return GET_SERVER_INFO
