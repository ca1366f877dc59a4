"""Data models for vendor configuration, regions and classification codes."""

from vendor_enrich.models.classification import ClassificationCode, ClassificationFamily
from vendor_enrich.models.config import CertificationFlag, RegionDefinition, VendorConfig, VendorField
from vendor_enrich.models.region import Region
from vendor_enrich.models.vendor import ClassificationLookup, VendorMap, VendorRecord

__all__ = [
    "CertificationFlag",
    "ClassificationCode",
    "ClassificationFamily",
    "ClassificationLookup",
    "Region",
    "RegionDefinition",
    "VendorConfig",
    "VendorField",
    "VendorMap",
    "VendorRecord",
]
