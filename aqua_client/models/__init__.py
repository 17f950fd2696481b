"""Typed records decoded from Aqua Protocol responses.

All records are frozen pydantic models; attribute names are snake_case
and wire keys that differ are declared as field aliases.
"""

from aqua_client.models.revision import (
    ContentData,
    Revision,
    RevisionContent,
    RevisionMerkleTreeProof,
    RevisionMetadata,
    RevisionSignature,
    RevisionWitness,
    VerificationContext,
)
from aqua_client.models.revision_hash import RevisionHash
from aqua_client.models.revision_info import RevisionInfo
from aqua_client.models.server_info import ServerInfo
from aqua_client.models.site_info import Namespace, SiteInfo
from aqua_client.models.timestamp import (
    AquaTimestamp,
    format_timestamp,
    parse_timestamp,
)

__all__: list[str] = [
    "AquaTimestamp",
    "ContentData",
    "Namespace",
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
    "VerificationContext",
    "format_timestamp",
    "parse_timestamp",
]
