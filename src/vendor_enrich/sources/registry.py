"""Registry for resolving vendor sources by format."""

from pathlib import Path
from typing import Optional, Type

from vendor_enrich.sources.base import BaseSource
from vendor_enrich.sources.files import CsvVendorSource, JsonVendorSource, detect_format


class SourceRegistry:
    """Maps format identifiers to source classes."""

    _sources: dict[str, Type[BaseSource]] = {
        "csv": CsvVendorSource,
        "json": JsonVendorSource,
    }

    @classmethod
    def get(cls, format_id: str, location: str | Path, **kwargs) -> BaseSource:
        """Get a source instance for the given format. kwargs passed to source __init__."""
        source_cls = cls._sources.get(format_id.lower())
        if not source_cls:
            raise ValueError(f"Unknown format: {format_id}. Available: {list(cls._sources.keys())}")
        return source_cls(location, **kwargs)

    @classmethod
    def for_location(cls, location: str | Path, format_id: Optional[str] = None, **kwargs) -> BaseSource:
        """Get a source for location, detecting the format from its extension when not given."""
        return cls.get(format_id or detect_format(location), location, **kwargs)

    @classmethod
    def available_formats(cls) -> list[str]:
        """Return list of available format identifiers."""
        return list(cls._sources.keys())
