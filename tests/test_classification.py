"""Unit tests for classification code lookup and expansion."""

import pytest

from vendor_enrich.enrichment.classification import (
    append_supplier_type_information,
    build_lookup,
    expand_codes,
)
from vendor_enrich.models.classification import ClassificationCode, ClassificationFamily

NIGP = ClassificationFamily(name="nigp", source_property="nigpCodes", destination_property="nigpCode")
NAICS = ClassificationFamily(name="naics", source_property="naicsCodes", destination_property="naicsCode")


class TestBuildLookup:
    """Tests for build_lookup."""

    def test_single_entry(self) -> None:
        """One code table row becomes one lookup key."""
        lookup = build_lookup([{"code": "00505", "description": "Abrasive equip and tools"}])
        assert lookup == {"00505": {"description": "Abrasive equip and tools"}}

    def test_last_duplicate_wins(self) -> None:
        """Later rows replace earlier rows with the same code."""
        lookup = build_lookup(
            [
                {"code": "24500", "description": "Old"},
                {"code": "25000", "description": "Tree felling"},
                {"code": "24500", "description": "Wood chucking"},
            ]
        )
        assert lookup == {
            "24500": {"description": "Wood chucking"},
            "25000": {"description": "Tree felling"},
        }

    def test_accepts_models(self) -> None:
        """ClassificationCode models work like mappings."""
        lookup = build_lookup([ClassificationCode(code="9800", description="Dump truckin'")])
        assert lookup == {"9800": {"description": "Dump truckin'"}}

    def test_empty_list(self) -> None:
        assert build_lookup([]) == {}

    @pytest.mark.parametrize("entries", [None, {"code": "1"}, "00505"])
    def test_non_list_raises(self, entries) -> None:
        """Input must be a list."""
        with pytest.raises(TypeError, match="list"):
            build_lookup(entries)


class TestExpandCodes:
    """Tests for expand_codes."""

    def test_known_codes_appended_in_order(self, nigp_lookup: dict) -> None:
        """Found codes become {id, description}; unknown 23000 is dropped."""
        vendors = [{"nigpCodes": "24500|25000|23000"}]
        expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert vendors[0]["nigpCode"] == [
            {"id": "24500", "description": "Wood chucking"},
            {"id": "25000", "description": "Tree felling"},
        ]

    def test_source_field_kept(self, nigp_lookup: dict) -> None:
        """Raw code string and unrelated fields are untouched."""
        vendors = [{"nigpCodes": "24500", "name": "Timber"}]
        expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert vendors[0]["nigpCodes"] == "24500"
        assert vendors[0]["name"] == "Timber"

    def test_vendor_without_source_field_untouched(self, nigp_lookup: dict) -> None:
        """No source field: no destination list is created."""
        vendors = [{"name": "No codes"}]
        expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert vendors == [{"name": "No codes"}]

    def test_all_unknown_codes_give_empty_list(self, nigp_lookup: dict) -> None:
        vendors = [{"nigpCodes": "11111|22222"}]
        expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert vendors[0]["nigpCode"] == []

    def test_existing_entries_preserved(self, nigp_lookup: dict) -> None:
        """Entries already in the destination list are kept; new ones appended."""
        existing = {"id": "00505", "description": "Abrasive equip and tools"}
        vendors = [{"nigpCodes": "25000", "nigpCode": [existing]}]
        expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert vendors[0]["nigpCode"] == [existing, {"id": "25000", "description": "Tree felling"}]

    def test_non_list_destination_reset(self, nigp_lookup: dict) -> None:
        """A scalar destination (e.g. a CSV column) is replaced by a list."""
        vendors = [{"nigpCodes": "24500", "nigpCode": "24500"}]
        expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert vendors[0]["nigpCode"] == [{"id": "24500", "description": "Wood chucking"}]

    def test_returns_same_list(self, nigp_lookup: dict) -> None:
        vendors = [{"nigpCodes": "24500"}]
        assert expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup) is vendors

    def test_non_list_vendors_raises(self, nigp_lookup: dict) -> None:
        with pytest.raises(TypeError, match="vendors"):
            expand_codes({"nigpCodes": "24500"}, "nigpCodes", "nigpCode", nigp_lookup)  # type: ignore[arg-type]

    def test_non_mapping_lookup_raises(self) -> None:
        with pytest.raises(TypeError, match="lookup"):
            expand_codes([{"nigpCodes": "24500"}], "nigpCodes", "nigpCode", ["24500"])  # type: ignore[arg-type]

    def test_non_string_source_raises_before_mutation(self, nigp_lookup: dict) -> None:
        """A bad value anywhere aborts before any vendor is expanded."""
        vendors = [{"nigpCodes": "24500"}, {"nigpCodes": 24500}]
        with pytest.raises(TypeError, match="nigpCodes"):
            expand_codes(vendors, "nigpCodes", "nigpCode", nigp_lookup)
        assert "nigpCode" not in vendors[0]


class TestAppendSupplierTypeInformation:
    """Tests for append_supplier_type_information."""

    def test_each_family_uses_its_own_lookup(self, nigp_lookup: dict, naics_lookup: dict) -> None:
        """NIGP and NAICS codes are expanded into separate destination lists."""
        vendors = [
            {"nigpCodes": "24500|25000|23000", "naicsCodes": "9800|4500"},
            {"nigpCodes": "24500"},
        ]
        result = append_supplier_type_information(vendors, [(NIGP, nigp_lookup), (NAICS, naics_lookup)])
        assert result == [
            {
                "nigpCodes": "24500|25000|23000",
                "naicsCodes": "9800|4500",
                "nigpCode": [
                    {"id": "24500", "description": "Wood chucking"},
                    {"id": "25000", "description": "Tree felling"},
                ],
                "naicsCode": [
                    {"id": "9800", "description": "Dump truckin'"},
                    {"id": "4500", "description": "Long haulin'"},
                ],
            },
            {
                "nigpCodes": "24500",
                "nigpCode": [{"id": "24500", "description": "Wood chucking"}],
            },
        ]

    def test_codes_not_shared_across_families(self, nigp_lookup: dict) -> None:
        """A NAICS field holding NIGP codes finds nothing in the NAICS table."""
        vendors = [{"naicsCodes": "24500"}]
        append_supplier_type_information(vendors, [(NAICS, {"9800": {"description": "x"}}), (NIGP, nigp_lookup)])
        assert vendors[0]["naicsCode"] == []
        assert "nigpCode" not in vendors[0]

    def test_none_lookup_skipped(self, nigp_lookup: dict) -> None:
        vendors = [{"nigpCodes": "24500", "naicsCodes": "9800"}]
        append_supplier_type_information(vendors, [(NIGP, nigp_lookup), (NAICS, None)])
        assert "naicsCode" not in vendors[0]
        assert len(vendors[0]["nigpCode"]) == 1
