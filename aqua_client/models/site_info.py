"""Site identity records nested inside a RevisionInfo.

Sites are wiki-style: content is grouped into numbered namespaces, each
with a title and a case-sensitivity flag.
"""

from pydantic import BaseModel, ConfigDict, Field


class Namespace(BaseModel):
    """A site-organizational grouping of content.

    Attributes:
        case_sensitive: Whether titles in this namespace are case sensitive
            (wire key ``case``).
        title: Display name of the namespace.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    case_sensitive: bool = Field(alias="case")
    title: str


class SiteInfo(BaseModel):
    """Identity of the site hosting a hash chain.

    Attributes:
        site_name: Human-readable site name (wire key ``sitename``).
        db_name: Backing database name (wire key ``dbname``).
        base: Base URL of the site.
        generator: Software name and version that generated the site.
        case: Site-wide title case policy.
        namespaces: Namespaces keyed by integer namespace id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    site_name: str = Field(alias="sitename")
    db_name: str = Field(alias="dbname")
    base: str
    generator: str
    case: str
    namespaces: dict[int, Namespace] = Field(default_factory=dict)
