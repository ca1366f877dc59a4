"""CSV and JSON vendor sources, and classification code table loading."""

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Optional

import httpx
from pydantic import ValidationError

from vendor_enrich.models.classification import ClassificationCode
from vendor_enrich.models.vendor import VendorRecord

from .base import BaseSource


class CsvVendorSource(BaseSource):
    """Vendor export as CSV; one record per row, values kept as strings."""

    format_id = "csv"

    def parse(self, content: str) -> list[VendorRecord]:
        """Parse CSV with proper handling of quoted multiline fields."""
        reader = csv.DictReader(StringIO(content))
        return [dict(row) for row in reader]


class JsonVendorSource(BaseSource):
    """Vendor export as JSON: a top-level list, or an object with a 'vendors' list."""

    format_id = "json"

    def parse(self, content: str) -> list[VendorRecord]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.location}: {e}") from e
        if isinstance(data, dict):
            data = data.get("vendors")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of vendor objects in {self.location}")
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"Vendor entries must be objects. Invalid value: {item!r}")
        return data


def detect_format(location: str | Path) -> str:
    """Guess 'csv' or 'json' from the location's extension (URL query strings ignored)."""
    suffix = Path(str(location).split("?", 1)[0]).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".csv", ".txt"):
        return "csv"
    raise ValueError(f"Cannot detect format of {location}; pass csv or json explicitly")


def load_classification_codes(
    location: str | Path,
    fmt: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> list[ClassificationCode]:
    """
    Load a code table with 'code' and 'description' columns (CSV) or keys (JSON).
    Codes are read as strings so leading zeros survive ('00505').
    """
    fmt = fmt or detect_format(location)
    source: BaseSource = (
        JsonVendorSource(location, client=client)
        if fmt == "json"
        else CsvVendorSource(location, client=client)
    )
    rows = source.load()
    for row in rows:
        if row.get("code") is None or str(row["code"]).strip() == "":
            raise ValueError(f"Code table {location} has a row without a 'code' value: {row!r}")
    try:
        return [
            ClassificationCode(code=str(row["code"]).strip(), description=row.get("description") or "")
            for row in rows
        ]
    except ValidationError as e:
        raise ValueError(f"Invalid classification code table {location}: {e}") from e
