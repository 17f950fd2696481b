"""Unit tests for RevisionInfo, SiteInfo and Namespace decoding."""

import json
from typing import Any

import pytest
from pydantic import ValidationError

from aqua_client.models import Namespace, RevisionInfo, SiteInfo


class TestRevisionInfoDecoding:
    """Tests for decoding a get_hash_chain_info body."""

    def test_decodes_all_scalar_fields(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """Every top-level field lands on its attribute unchanged."""
        info = RevisionInfo.model_validate_json(json.dumps(revision_info_payload))

        assert info.genesis_hash == revision_info_payload["genesis_hash"]
        assert info.current_revision == "42"
        assert info.domain_id == "95a3f0c1d2"
        assert info.content == "Welcome to the wiki."
        assert (
            info.latest_verification_hash
            == revision_info_payload["latest_verification_hash"]
        )
        assert info.title == "Main Page"
        assert info.namespace == 0
        assert info.chain_height == 3

    def test_decodes_site_info(self, revision_info_payload: dict[str, Any]) -> None:
        """Wire keys sitename and dbname map to snake_case attributes."""
        info = RevisionInfo.model_validate_json(json.dumps(revision_info_payload))

        assert isinstance(info.site_info, SiteInfo)
        assert info.site_info.site_name == "Personal Knowledge Container"
        assert info.site_info.db_name == "my_wiki"
        assert info.site_info.generator == "MediaWiki 1.37.1"
        assert info.site_info.case == "first-letter"

    def test_namespaces_keyed_by_integer_id(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """JSON object keys become integer namespace ids, negatives included."""
        info = RevisionInfo.model_validate_json(json.dumps(revision_info_payload))

        assert set(info.site_info.namespaces) == {0, 1, -1}
        assert info.site_info.namespaces[1] == Namespace(
            case_sensitive=True, title="Talk"
        )
        assert info.site_info.namespaces[-1].title == "Special"

    def test_round_trips_through_aliases(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """Dumping by alias reproduces the wire shape."""
        info = RevisionInfo.model_validate(revision_info_payload)
        dumped = info.model_dump(by_alias=True)

        assert RevisionInfo.model_validate(dumped) == info
        assert dumped["site_info"]["sitename"] == "Personal Knowledge Container"
        assert dumped["site_info"]["namespaces"][1] == {"case": True, "title": "Talk"}

    def test_ignores_unknown_fields(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """Extra keys from newer servers do not break decoding."""
        revision_info_payload["future_field"] = {"nested": 1}

        info = RevisionInfo.model_validate(revision_info_payload)

        assert not hasattr(info, "future_field")


class TestRevisionInfoInvariants:
    """Tests for decode-time invariants."""

    def test_negative_chain_height_rejected(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """chain_height is never negative."""
        revision_info_payload["chain_height"] = -1

        with pytest.raises(ValidationError):
            RevisionInfo.model_validate(revision_info_payload)

    def test_empty_chain_height_zero_allowed(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """A chain height of zero is valid."""
        revision_info_payload["chain_height"] = 0

        assert RevisionInfo.model_validate(revision_info_payload).chain_height == 0

    @pytest.mark.parametrize("field", ["genesis_hash", "current_revision"])
    def test_empty_identifiers_rejected(
        self, revision_info_payload: dict[str, Any], field: str
    ) -> None:
        """Content-addressed identifiers must be non-empty."""
        revision_info_payload[field] = ""

        with pytest.raises(ValidationError):
            RevisionInfo.model_validate(revision_info_payload)

    def test_missing_site_info_rejected(
        self, revision_info_payload: dict[str, Any]
    ) -> None:
        """site_info is required."""
        del revision_info_payload["site_info"]

        with pytest.raises(ValidationError):
            RevisionInfo.model_validate(revision_info_payload)

    def test_records_are_frozen(self, revision_info_payload: dict[str, Any]) -> None:
        """Decoded records cannot be mutated."""
        info = RevisionInfo.model_validate(revision_info_payload)

        with pytest.raises(ValidationError):
            info.title = "Other Page"  # type: ignore[misc]
