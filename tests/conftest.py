"""
Pytest configuration and shared fixtures for aqua-client tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- HTTP is faked with httpx.MockTransport, never a live server
- Unit tests go in tests/unit/
"""

import copy
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import structlog

from aqua_client import AquaClient

TEST_ENDPOINT = "https://aqua.test/rest.php"
TEST_TOKEN = "secret-token"

GENESIS_HASH = "a1" * 64
LATEST_HASH = "b2" * 64

REVISION_INFO_PAYLOAD: dict[str, Any] = {
    "genesis_hash": GENESIS_HASH,
    "current_revision": "42",
    "domain_id": "95a3f0c1d2",
    "content": "Welcome to the wiki.",
    "latest_verification_hash": LATEST_HASH,
    "site_info": {
        "sitename": "Personal Knowledge Container",
        "dbname": "my_wiki",
        "base": "http://localhost:9352/index.php/Main_Page",
        "generator": "MediaWiki 1.37.1",
        "case": "first-letter",
        "namespaces": {
            "0": {"case": True, "title": ""},
            "1": {"case": True, "title": "Talk"},
            "-1": {"case": True, "title": "Special"},
        },
    },
    "title": "Main Page",
    "namespace": 0,
    "chain_height": 3,
}

REVISION_PAYLOAD: dict[str, Any] = {
    "context": {
        "has_previous_signature": True,
        "has_previous_witness": False,
    },
    "content": {
        "rev_id": 42,
        "content": {
            "main": "Welcome to the wiki.",
            "transclusion-hashes": "[]",
        },
        "content_hash": "c3" * 64,
    },
    "metadata": {
        "domain_id": "95a3f0c1d2",
        "time_stamp": "20240115093000",
        "previous_verification_hash": GENESIS_HASH,
        "metadata_hash": "d4" * 64,
        "verification_hash": LATEST_HASH,
    },
    "signature": {
        "signature": "0x" + "e5" * 65,
        "wallet_address": "0xa2026582b94feb9124231fbf7b052c39218954c2",
        "signature_hash": "f6" * 64,
    },
    "witness": {
        "domain_manifest_genesis_hash": "07" * 64,
        "merkle_root": "18" * 64,
        "witness_network": "goerli",
        "transaction": "0x" + "29" * 32,
        "witness_hash": "3a" * 64,
    },
    "merkle_tree_proof": None,
}


@pytest.fixture
def revision_info_payload() -> dict[str, Any]:
    """A well-formed get_hash_chain_info body."""
    return copy.deepcopy(REVISION_INFO_PAYLOAD)


@pytest.fixture
def revision_payload() -> dict[str, Any]:
    """A well-formed get_revision body with signature and witness."""
    return copy.deepcopy(REVISION_PAYLOAD)


@pytest.fixture
def make_client() -> Callable[..., AquaClient]:
    """Factory for clients whose requests are answered by a handler."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        endpoint: str = TEST_ENDPOINT,
        token: str = TEST_TOKEN,
    ) -> AquaClient:
        return AquaClient(endpoint, token, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()
