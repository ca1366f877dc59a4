#!/usr/bin/env python3
"""Quick look at the certified vendors in an export.

Run:
  poetry run python scripts/preview_vendors.py vendors.csv
  poetry run python scripts/preview_vendors.py https://example.org/vendors.json config.yaml
"""

import sys

from vendor_enrich.models.config import VendorConfig
from vendor_enrich.pipeline import VendorPipeline
from vendor_enrich.sources import SourceRegistry


def main() -> None:
    if len(sys.argv) < 2:
        raise SystemExit("usage: preview_vendors.py LOCATION [CONFIG_YAML]")
    location = sys.argv[1]
    config = VendorConfig.from_yaml(sys.argv[2]) if len(sys.argv) > 2 else VendorConfig()

    vendors = SourceRegistry.for_location(location).load()
    print(f"Got {len(vendors)} raw vendor records")
    vendor_map = VendorPipeline(config).initialize_suppliers(vendors)
    print(f"{len(vendor_map)} certified")
    for i, (number, vendor) in enumerate(list(vendor_map.items())[:5], 1):
        region = vendor.get("region", "-")
        print(f"  {i}. [{number}] {', '.join(vendor['certifications'])} (region={region})")
    if not vendor_map:
        print("\n⚠️ No certified vendors. Check the flag property names in your config.")


if __name__ == "__main__":
    main()
