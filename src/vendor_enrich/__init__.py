"""Enrichment of certified vendor records: certifications, regions and classification codes."""

__version__ = "0.1.0"
