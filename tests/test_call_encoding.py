"""
Test suite for Remote Call construction and parameter encoding.
"""

from enum import Enum

import pytest

from matomo_client.core.call import RemoteCall, compact_params, encode_bulk_url, encode_params


# ============================================================================
# Test Remote Call
# ============================================================================

class TestRemoteCall:
    """Tests for the RemoteCall model."""

    def test_namespace_and_action(self):
        call = RemoteCall("VisitsSummary.get", {"idSite": 1})

        assert call.namespace == "VisitsSummary"
        assert call.action == "get"
        assert call.params == {"idSite": 1}

    def test_params_default_to_empty(self):
        assert dict(RemoteCall("Tour.getLevel").params) == {}

    @pytest.mark.parametrize("method", ["", "getLevel", ".getLevel", "Tour.", "Tour .getLevel", None])
    def test_invalid_method_rejected(self, method):
        with pytest.raises(ValueError):
            RemoteCall(method)

    def test_params_are_read_only(self):
        call = RemoteCall("SEO.getRank", {"url": "https://example.com"})

        with pytest.raises(TypeError):
            call.params["url"] = "https://other.example.com"

    def test_params_copied_from_source(self):
        source = {"idSite": 1}
        call = RemoteCall("UserId.getUsers", source)
        source["idSite"] = 2

        assert call.params["idSite"] == 1

    def test_to_dict(self):
        call = RemoteCall("Tour.skipChallenge", {"id": "track_data"})

        assert call.to_dict() == {"method": "Tour.skipChallenge", "params": {"id": "track_data"}}


# ============================================================================
# Test Optional Parameter Compaction
# ============================================================================

class TestCompactParams:
    """Tests for dropping unset optional parameters."""

    def test_drops_unset_values(self):
        params = {"segment": "", "limit": None, "columns": [], "filters": {}, "sites": ()}

        assert compact_params(params) == {}

    def test_keeps_falsy_values_that_carry_meaning(self):
        params = {"idSubtable": 0, "flat": False, "label": "0"}

        assert compact_params(params) == params


# ============================================================================
# Test Parameter Encoding
# ============================================================================

class Scope(str, Enum):
    VISIT = "visit"


class TestEncodeParams:
    """Tests for flattening parameters to wire pairs."""

    def test_scalars(self):
        assert encode_params({"idSite": 3, "date": "today", "revenue": 1.5}) == [
            ("idSite", "3"),
            ("date", "today"),
            ("revenue", "1.5"),
        ]

    def test_booleans_become_digits(self):
        assert encode_params({"expanded": True, "flat": False}) == [
            ("expanded", "1"),
            ("flat", "0"),
        ]

    def test_enum_uses_value(self):
        assert encode_params({"scope": Scope.VISIT}) == [("scope", "visit")]

    def test_scalar_list_is_comma_joined(self):
        assert encode_params({"urls": ["https://a.example", "https://b.example"]}) == [
            ("urls", "https://a.example,https://b.example"),
        ]

    def test_nested_mapping_uses_brackets(self):
        pairs = encode_params({"parameters": {"trackingType": "pageview", "customUrl": ""}})

        assert pairs == [
            ("parameters[trackingType]", "pageview"),
            ("parameters[customUrl]", ""),
        ]

    def test_list_of_mappings_is_indexed(self):
        pairs = encode_params({
            "variations": [{"name": "Green"}, {"name": "Blue", "percentage": 30}],
        })

        assert pairs == [
            ("variations[0][name]", "Green"),
            ("variations[1][name]", "Blue"),
            ("variations[1][percentage]", "30"),
        ]

    def test_none_is_skipped(self):
        assert encode_params({"idSite": None, "date": "today"}) == [("date", "today")]

    def test_none_params(self):
        assert encode_params(None) == []


class TestEncodeBulkUrl:
    """Tests for bulk sub-request encoding."""

    def test_method_comes_first_and_values_are_escaped(self):
        call = RemoteCall("SEO.getRank", {"url": "https://a.example/?x=1"})

        assert encode_bulk_url(call) == "?method=SEO.getRank&url=https%3A%2F%2Fa.example%2F%3Fx%3D1"

    def test_call_without_params(self):
        assert encode_bulk_url(RemoteCall("Tour.getLevel")) == "?method=Tour.getLevel"
