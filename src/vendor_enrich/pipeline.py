"""Pipeline orchestration: normalize flags → derive certifications → key by certification number → regions."""

import logging
from collections.abc import Mapping
from typing import Optional

from vendor_enrich.enrichment import (
    add_region_property,
    append_supplier_type_information,
    convert_properties_to_boolean,
)
from vendor_enrich.models.config import CERTIFICATION_SUFFIX, VendorConfig, VendorField
from vendor_enrich.models.vendor import VendorMap, VendorRecord

logger = logging.getLogger(__name__)

CERTIFICATIONS_PROPERTY = "certifications"


def certification_name(flag_property: str) -> str:
    """'smallStartDate' -> 'small'."""
    return flag_property.removesuffix(CERTIFICATION_SUFFIX)


class VendorPipeline:
    """
    Turns raw vendor records into a map of certified vendors.
    Property names are resolved from the config once, at construction.
    """

    def __init__(self, config: Optional[VendorConfig] = None):
        self.config = config or VendorConfig()
        self._keys = self.config.field_keys()
        self._certification_properties = self.config.certification_properties()
        self._regions = self.config.build_regions()
        self._families = [self.config.nigp_family(), self.config.naics_family()]

    def derive_certifications(self, vendor: VendorRecord) -> list[str]:
        """Names of the certifications whose (already coerced) flags are True, in config order.

        Two flag properties can strip to the same name ('small', 'smallStartDate');
        the name is listed once.
        """
        names = [
            certification_name(prop)
            for prop in self._certification_properties
            if vendor.get(prop) is True
        ]
        return list(dict.fromkeys(names))

    def initialize_suppliers(self, vendors: list[VendorRecord]) -> VendorMap:
        """
        Normalize flags on every vendor, attach its certifications list, and
        keep vendors with at least one certification, keyed by certification
        number. Regions are assigned to the kept vendors afterwards.

        Input records are mutated in place. Any invalid record aborts the call.
        """
        if not isinstance(vendors, (list, tuple)):
            raise TypeError(f"Parameter 'vendors' must be a list. Invalid value: {vendors!r}")

        number_key = self._keys[VendorField.CERTIFICATION_NUMBER]
        boolean_properties = [self._keys[VendorField.UNIQUE_VENDOR_ID], *self._certification_properties]

        vendor_map: VendorMap = {}
        for vendor in vendors:
            convert_properties_to_boolean(vendor, boolean_properties)

            certifications = self.derive_certifications(vendor)
            vendor[CERTIFICATIONS_PROPERTY] = certifications
            if not certifications:
                continue

            number = vendor.get(number_key)
            if number is None or number == "":
                raise ValueError(
                    f"Certified vendor is missing '{number_key}'. Invalid value: {vendor!r}"
                )
            vendor_map[number] = vendor

        logger.debug("Kept %d of %d vendors with at least one certification", len(vendor_map), len(vendors))

        add_region_property(vendor_map, self._regions, zip_property=self._keys[VendorField.ZIP])
        return vendor_map

    def append_supplier_types(
        self,
        vendors: list[VendorRecord],
        nigp_lookup: Optional[Mapping[str, Mapping[str, str]]] = None,
        naics_lookup: Optional[Mapping[str, Mapping[str, str]]] = None,
    ) -> list[VendorRecord]:
        """Expand NIGP and NAICS code strings on every vendor (certified or not)."""
        nigp_family, naics_family = self._families
        return append_supplier_type_information(
            vendors,
            [(nigp_family, nigp_lookup), (naics_family, naics_lookup)],
        )


def run_pipeline(
    vendors: list[VendorRecord],
    config: Optional[VendorConfig] = None,
    *,
    nigp_lookup: Optional[Mapping[str, Mapping[str, str]]] = None,
    naics_lookup: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> VendorMap:
    """
    Run the full enrichment: classification expansion over all vendors,
    then certification filtering and region assignment.
    """
    pipeline = VendorPipeline(config)
    if nigp_lookup is not None or naics_lookup is not None:
        pipeline.append_supplier_types(vendors, nigp_lookup, naics_lookup)
    return pipeline.initialize_suppliers(vendors)
