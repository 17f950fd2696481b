"""Root record of a hash-chain lookup."""

from pydantic import BaseModel, ConfigDict, Field

from aqua_client.models.site_info import SiteInfo


class RevisionInfo(BaseModel):
    """Context of a single hash chain, returned by ``get_hash_chain_info``.

    ``genesis_hash`` and ``current_revision`` are content-addressed
    identifiers and must be non-empty for a valid chain; ``chain_height``
    is never negative. Bodies violating either rule fail to decode.

    Attributes:
        genesis_hash: Verification hash of the first revision in the chain.
        current_revision: Identifier of the current revision.
        domain_id: Identifier of the domain that owns the chain.
        content: Current content of the page.
        latest_verification_hash: Verification hash of the newest revision.
        title: Page title.
        namespace: Integer namespace id of the page.
        chain_height: Number of revisions in the chain.
        site_info: Identity of the hosting site.
    """

    model_config = ConfigDict(frozen=True)

    genesis_hash: str = Field(min_length=1)
    current_revision: str = Field(min_length=1)
    domain_id: str
    content: str
    latest_verification_hash: str
    title: str
    namespace: int
    chain_height: int = Field(ge=0)
    site_info: SiteInfo
