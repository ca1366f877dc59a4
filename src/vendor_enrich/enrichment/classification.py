"""Expansion of pipe-delimited classification codes (NIGP, NAICS) into described entries."""

import logging
from collections.abc import Mapping, Sequence
from typing import Optional

from vendor_enrich.models.classification import ClassificationCode, ClassificationFamily
from vendor_enrich.models.vendor import ClassificationLookup, VendorRecord

logger = logging.getLogger(__name__)

CODE_DELIMITER = "|"


def build_lookup(entries: Sequence[Mapping[str, str] | ClassificationCode]) -> ClassificationLookup:
    """
    Build {code: {"description": ...}} from a code table.
    Entries are {code, description} mappings or ClassificationCode models.
    Later entries replace earlier ones with the same code.
    """
    if not isinstance(entries, (list, tuple)):
        raise TypeError(f"Parameter 'entries' must be a list. Invalid value: {entries!r}")

    lookup: ClassificationLookup = {}
    for entry in entries:
        if isinstance(entry, ClassificationCode):
            code, description = entry.code, entry.description
        elif isinstance(entry, Mapping):
            code, description = entry.get("code"), entry.get("description")
        else:
            raise TypeError(f"Each entry must be a mapping with code and description. Invalid value: {entry!r}")
        lookup[code] = {"description": description}
    return lookup


def split_codes(value: str) -> list[str]:
    """Split a raw 'a|b|c' field into codes. Codes are not trimmed."""
    return value.split(CODE_DELIMITER)


def expand_codes(
    vendors: list[VendorRecord],
    source_property: str,
    destination_property: str,
    lookup: Mapping[str, Mapping[str, str]],
) -> list[VendorRecord]:
    """
    For each vendor carrying source_property, append {"id", "description"}
    to vendor[destination_property] for every code found in lookup.

    Unknown codes are skipped. Existing destination entries are kept; a
    missing or non-list destination is replaced by an empty list first.
    Mutates vendors in place and returns the same list.
    """
    if not isinstance(vendors, list):
        raise TypeError(f"Parameter 'vendors' must be a list. Invalid value: {vendors!r}")
    if not isinstance(lookup, Mapping):
        raise TypeError(f"Parameter 'lookup' must be a mapping. Invalid value: {lookup!r}")
    for vendor in vendors:
        if source_property in vendor and not isinstance(vendor[source_property], str):
            raise TypeError(
                f"Property '{source_property}' must be a string of codes. "
                f"Invalid value: {vendor[source_property]!r}"
            )

    appended = 0
    for vendor in vendors:
        if source_property not in vendor:
            continue
        if not isinstance(vendor.get(destination_property), list):
            vendor[destination_property] = []
        for code in split_codes(vendor[source_property]):
            entry = lookup.get(code)
            if entry:
                vendor[destination_property].append(
                    {"id": code, "description": entry.get("description", "")}
                )
                appended += 1

    logger.debug("Expanded %d %s entries into %r", appended, source_property, destination_property)
    return vendors


def append_supplier_type_information(
    vendors: list[VendorRecord],
    expansions: Sequence[tuple[ClassificationFamily, Optional[Mapping[str, Mapping[str, str]]]]],
) -> list[VendorRecord]:
    """
    Run expand_codes once per (family, lookup) pair, each family against its
    own table. Pairs with a None lookup are skipped.
    """
    for family, lookup in expansions:
        if lookup is None:
            continue
        expand_codes(vendors, family.source_property, family.destination_property, lookup)
    return vendors
