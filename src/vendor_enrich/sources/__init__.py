"""Vendor record sources (CSV/JSON, local files or URLs)."""

from vendor_enrich.sources.base import BaseSource
from vendor_enrich.sources.files import (
    CsvVendorSource,
    JsonVendorSource,
    detect_format,
    load_classification_codes,
)
from vendor_enrich.sources.registry import SourceRegistry

__all__ = [
    "BaseSource",
    "CsvVendorSource",
    "JsonVendorSource",
    "SourceRegistry",
    "detect_format",
    "load_classification_codes",
]
