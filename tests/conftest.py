"""Pytest fixtures for vendor-enrich tests."""

import csv
from io import StringIO

import pytest

from vendor_enrich.models.config import VendorConfig
from vendor_enrich.models.region import Region


def _build_csv(rows: list[dict]) -> str:
    """Build CSV string from list of row dicts."""
    if not rows:
        return ""
    out = StringIO()
    writer = csv.DictWriter(out, fieldnames=rows[0].keys())
    writer.writeheader()
    writer.writerows(rows)
    return out.getvalue()


@pytest.fixture
def config() -> VendorConfig:
    """Default config (legacy property names, two Virginia regions)."""
    return VendorConfig()


@pytest.fixture
def regions() -> list[Region]:
    """New River Valley listed before Roanoke Valley."""
    return [
        Region(
            "New River Valley",
            frozenset({"24068", "24073", "24061", "24060", "24141", "24142", "24143"}),
        ),
        Region(
            "Roanoke Valley",
            frozenset({"24011", "24012", "24013", "24014", "24015", "24016", "24017", "24018", "24019"}),
        ),
    ]


@pytest.fixture
def sample_vendors() -> list[dict]:
    """Four vendors as loaded from CSV; the last one holds no certification."""
    return [
        {
            "vendorId": "V-100",
            "certificationNumber": "1111",
            "name": "Blacksburg Timber Works",
            "zip": "24060",
            "microStartDate": "2019-04-01",
            "minorityOwnedStartDate": "",
            "smallStartDate": "2018-01-15",
            "womanOwnedStartDate": "",
            "nigpCodes": "24500|25000",
        },
        {
            "vendorId": "V-200",
            "certificationNumber": "2222",
            "name": "Star City Hauling",
            "zip": "24011",
            "microStartDate": "",
            "minorityOwnedStartDate": "2020-06-30",
            "smallStartDate": "",
            "womanOwnedStartDate": "2020-06-30",
            "naicsCodes": "9800|4500",
        },
        {
            "vendorId": "V-300",
            "certificationNumber": "3333",
            "name": "Springfield Office Supply",
            "zip": "22152",
            "microStartDate": "",
            "minorityOwnedStartDate": "",
            "smallStartDate": "2021-11-02",
            "womanOwnedStartDate": "",
        },
        {
            "vendorId": "V-400",
            "certificationNumber": "4444",
            "name": "Lapsed Consulting LLC",
            "zip": "24068",
            "microStartDate": "",
            "minorityOwnedStartDate": "",
            "smallStartDate": "",
            "womanOwnedStartDate": "",
        },
    ]


@pytest.fixture
def sample_vendors_csv(sample_vendors: list[dict]) -> str:
    """CSV export of the sample vendors, code columns dropped so every row shares a header."""
    rows = [
        {k: v for k, v in vendor.items() if k not in ("nigpCodes", "naicsCodes")}
        for vendor in sample_vendors
    ]
    return _build_csv(rows)


@pytest.fixture
def nigp_lookup() -> dict[str, dict[str, str]]:
    return {
        "24500": {"description": "Wood chucking"},
        "25000": {"description": "Tree felling"},
    }


@pytest.fixture
def naics_lookup() -> dict[str, dict[str, str]]:
    return {
        "9800": {"description": "Dump truckin'"},
        "4500": {"description": "Long haulin'"},
    }
