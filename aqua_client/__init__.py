"""Typed client for the Aqua Protocol data accounting API.

Retrieves revision chains and their provenance metadata (hashes,
signatures, witness records) over HTTP and decodes them into frozen,
typed records. Cryptographic verification of the fetched data is left
to the consumer.

Example usage:

    import asyncio
    from aqua_client import AquaClient, ClientConfig

    async def main():
        async with AquaClient.from_config(ClientConfig.from_environment()) as client:
            server = await client.get_server_info()
            info = await client.get_hash_chain_info("title", "Main Page")
            revision = await client.get_revision(info.latest_verification_hash)
        print(server.api_version, revision.metadata.timestamp)

    asyncio.run(main())
"""

__version__ = "0.1.0"

from aqua_client.client import AquaClient
from aqua_client.config import ClientConfig
from aqua_client.endpoints import IdType
from aqua_client.errors import (
    AquaError,
    ConfigError,
    DecodeError,
    FormatError,
    InvalidArgumentError,
    ProtocolError,
    TransportError,
)
from aqua_client.models import (
    ContentData,
    Namespace,
    Revision,
    RevisionContent,
    RevisionHash,
    RevisionInfo,
    RevisionMerkleTreeProof,
    RevisionMetadata,
    RevisionSignature,
    RevisionWitness,
    ServerInfo,
    SiteInfo,
    VerificationContext,
)

__all__ = [
    "AquaClient",
    "AquaError",
    "ClientConfig",
    "ConfigError",
    "ContentData",
    "DecodeError",
    "FormatError",
    "IdType",
    "InvalidArgumentError",
    "Namespace",
    "ProtocolError",
    "Revision",
    "RevisionContent",
    "RevisionHash",
    "RevisionInfo",
    "RevisionMerkleTreeProof",
    "RevisionMetadata",
    "RevisionSignature",
    "RevisionWitness",
    "ServerInfo",
    "SiteInfo",
    "TransportError",
    "VerificationContext",
    "__version__",
]
