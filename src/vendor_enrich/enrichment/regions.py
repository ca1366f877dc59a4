"""Region assignment by postal code."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from vendor_enrich.models.region import Region
from vendor_enrich.models.vendor import VendorRecord

logger = logging.getLogger(__name__)

REGION_PROPERTY = "region"


def _check_regions(regions: Any) -> None:
    message = f"Parameter 'regions' must be a list of Region objects. Invalid value: {regions!r}"
    if not isinstance(regions, (list, tuple)):
        raise TypeError(message)
    for region in regions:
        if not isinstance(region, Region):
            raise TypeError(message)


def match_region(zip_code: Any, regions: Sequence[Region]) -> Region | None:
    """First region (in list order) containing zip_code, or None."""
    for region in regions:
        if region.contains(zip_code):
            return region
    return None


def add_region_property(
    vendor_map: Mapping[str, VendorRecord],
    regions: Sequence[Region],
    zip_property: str = "zip",
) -> Mapping[str, VendorRecord]:
    """
    Set record["region"] on every vendor whose zip falls in one of regions.
    The first matching region wins, so overlapping regions are resolved by order.
    Vendors with no match get no region key at all.

    Mutates the records in place and returns the same vendor_map object.
    """
    if not isinstance(vendor_map, Mapping):
        raise TypeError(f"Parameter 'vendor_map' must be a mapping. Invalid value: {vendor_map!r}")
    _check_regions(regions)

    assigned = 0
    for vendor in vendor_map.values():
        region = match_region(vendor.get(zip_property), regions)
        if region is not None:
            vendor[REGION_PROPERTY] = region.name
            assigned += 1

    logger.debug("Assigned regions to %d of %d vendors", assigned, len(vendor_map))
    return vendor_map
