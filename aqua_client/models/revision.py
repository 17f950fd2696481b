"""Revision aggregate returned by ``get_revision``.

A Revision bundles the content of one versioned state of a page with its
provenance metadata. Signature and witness records are optional: they
are only meaningful when the matching flag in the VerificationContext is
set. The flags are authoritative, not the presence of the record, so
consumers should read ``effective_signature`` / ``effective_witness``
rather than the raw fields.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from aqua_client.models.timestamp import AquaTimestamp


class VerificationContext(BaseModel):
    """Whether the revision's predecessor carried optional provenance data."""

    model_config = ConfigDict(frozen=True)

    has_previous_signature: bool = False
    has_previous_witness: bool = False


class ContentData(BaseModel):
    """Revision body plus a serialized list of transcluded content hashes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    main: str = ""
    transclusion_hashes: str = Field(default="", alias="transclusion-hashes")


class RevisionContent(BaseModel):
    """Content of a revision and the hash computed over it."""

    model_config = ConfigDict(frozen=True)

    rev_id: int
    content: ContentData
    content_hash: str


class RevisionMetadata(BaseModel):
    """Metadata identifying a revision and linking it to its predecessor.

    Attributes:
        domain_id: Identifier of the domain that owns the revision.
        timestamp: When the revision was created, in UTC (wire key
            ``time_stamp``).
        previous_verification_hash: Verification hash of the predecessor,
            empty for a genesis revision.
        metadata_hash: Hash over the metadata fields.
        verification_hash: Unique identifier of this revision.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    domain_id: str
    timestamp: AquaTimestamp = Field(alias="time_stamp")
    previous_verification_hash: str = ""
    metadata_hash: str
    verification_hash: str

    @property
    def is_genesis(self) -> bool:
        """True if this revision starts its chain."""
        return not self.previous_verification_hash


class RevisionSignature(BaseModel):
    """Signature over a revision and the identity that produced it."""

    model_config = ConfigDict(frozen=True)

    signature: str
    wallet_address: str
    signature_hash: str


class RevisionWitness(BaseModel):
    """External attestation anchoring the revision, e.g. a blockchain transaction."""

    model_config = ConfigDict(frozen=True)

    domain_manifest_genesis_hash: str
    merkle_root: str
    witness_network: str
    transaction: str
    witness_hash: str


class RevisionMerkleTreeProof(BaseModel):
    """Placeholder for the Merkle inclusion proof of a witnessed revision.

    The protocol reserves this field without defining its payload, so no
    fields are declared. Whatever the server sends is kept untouched in
    ``model_extra``.
    """

    model_config = ConfigDict(frozen=True, extra="allow")


class Revision(BaseModel):
    """Full revision payload including optional signature and witness data."""

    model_config = ConfigDict(frozen=True)

    context: VerificationContext
    content: RevisionContent
    metadata: RevisionMetadata
    signature: Optional[RevisionSignature] = None
    witness: Optional[RevisionWitness] = None
    merkle_tree_proof: Optional[RevisionMerkleTreeProof] = None

    @property
    def effective_signature(self) -> Optional[RevisionSignature]:
        """The signature, or None unless ``context.has_previous_signature`` is set."""
        if not self.context.has_previous_signature:
            return None
        return self.signature

    @property
    def effective_witness(self) -> Optional[RevisionWitness]:
        """The witness, or None unless ``context.has_previous_witness`` is set."""
        if not self.context.has_previous_witness:
            return None
        return self.witness
