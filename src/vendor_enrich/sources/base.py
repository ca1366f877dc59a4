"""Abstract base class for vendor record sources."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import httpx

from vendor_enrich.models.vendor import VendorRecord

logger = logging.getLogger(__name__)


def is_url(location: str | Path) -> bool:
    return isinstance(location, str) and location.lower().startswith(("http://", "https://"))


class BaseSource(ABC):
    """
    Standard interface for vendor sources.
    A source reads raw text from a local path or an http(s) URL and parses it
    into plain vendor records; enrichment happens elsewhere.
    """

    format_id: str = ""

    DEFAULT_HEADERS = {
        "User-Agent": "vendor-enrich/0.1 (certified vendor directory)",
        "Accept": "text/csv, application/json, text/plain, */*",
    }

    def __init__(self, location: str | Path, client: Optional[httpx.Client] = None):
        self.location = location
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=60.0,
                follow_redirects=True,
                headers=self.DEFAULT_HEADERS,
            )
        return self._client

    def read_text(self) -> str:
        """Fetch raw content from the URL or read it from disk."""
        if is_url(self.location):
            logger.info("Fetching %s records from %s", self.format_id, self.location)
            response = self._get_client().get(str(self.location))
            response.raise_for_status()
            # match the utf-8-sig decoding of local files
            return response.text.removeprefix("\ufeff")
        logger.info("Reading %s records from %s", self.format_id, self.location)
        return Path(self.location).read_text(encoding="utf-8-sig")

    @abstractmethod
    def parse(self, content: str) -> list[VendorRecord]:
        """
        Convert raw content into a list of vendor records.
        """
        pass

    def load(self) -> list[VendorRecord]:
        """Read and parse all records."""
        return self.parse(self.read_text())
