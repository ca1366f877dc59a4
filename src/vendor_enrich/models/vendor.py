"""Vendor record types. Records stay plain dicts so loaders can pass through any column."""

from typing import Any

VendorRecord = dict[str, Any]
VendorMap = dict[str, VendorRecord]

# code -> {"description": ...}
ClassificationLookup = dict[str, dict[str, str]]
