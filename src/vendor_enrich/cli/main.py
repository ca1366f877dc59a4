"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import httpx
import yaml

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="vendor-enrich",
        description="Enrich certified vendor records with certifications, regions and classification codes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # enrich
    enrich_parser = subparsers.add_parser("enrich", help="Build the certified vendor map")
    enrich_parser.add_argument(
        "--input",
        required=True,
        help="Vendor export: local path or http(s) URL (CSV or JSON)",
    )
    enrich_parser.add_argument(
        "--format",
        choices=["csv", "json"],
        default=None,
        help="Input format (default: detect from extension)",
    )
    enrich_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: built-in property names and regions)",
    )
    enrich_parser.add_argument(
        "--nigp",
        default=None,
        help="NIGP code table (CSV/JSON with code, description)",
    )
    enrich_parser.add_argument(
        "--naics",
        default=None,
        help="NAICS code table (CSV/JSON with code, description)",
    )
    enrich_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write enriched vendor map JSON to file (default: stdout)",
    )

    # regions
    regions_parser = subparsers.add_parser("regions", help="Show configured regions")
    regions_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML",
    )

    # lookup
    lookup_parser = subparsers.add_parser("lookup", help="Build a code lookup from a classification table")
    lookup_parser.add_argument("table", help="Code table path or URL (CSV/JSON)")
    lookup_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write lookup JSON to file (default: stdout)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.command == "enrich":
        _run_enrich(args)
    elif args.command == "regions":
        _run_regions(args)
    elif args.command == "lookup":
        _run_lookup(args)
    else:
        parser.print_help()


def _load_config(path: Optional[Path]):
    from vendor_enrich.models.config import VendorConfig

    if path is None:
        return VendorConfig()
    try:
        return VendorConfig.from_yaml(path)
    except FileNotFoundError:
        raise SystemExit(f"Config file not found: {path}")
    except (ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"Invalid config {path}:\n{e}")


def _load_lookup(table: Optional[str]):
    from vendor_enrich.enrichment import build_lookup
    from vendor_enrich.sources import load_classification_codes

    if table is None:
        return None
    try:
        return build_lookup(load_classification_codes(table))
    except (OSError, ValueError, httpx.HTTPError) as e:
        raise SystemExit(f"Could not load code table {table}: {e}")


def _write_output(output: str, path: Optional[Path], summary: str) -> None:
    if path:
        path.write_text(output, encoding="utf-8")
        print(f"{summary} (wrote to {path})")
    else:
        print(output)


def _run_enrich(args: argparse.Namespace) -> None:
    """Run enrich command."""
    from vendor_enrich.pipeline import run_pipeline
    from vendor_enrich.sources import SourceRegistry

    config = _load_config(args.config)
    nigp_lookup = _load_lookup(args.nigp)
    naics_lookup = _load_lookup(args.naics)

    try:
        source = SourceRegistry.for_location(args.input, args.format)
        vendors = source.load()
    except (OSError, ValueError, httpx.HTTPError) as e:
        raise SystemExit(f"Could not load vendors from {args.input}: {e}")

    if not vendors:
        print(f"No vendor records in {args.input}", file=sys.stderr)
        raise SystemExit(1)

    try:
        vendor_map = run_pipeline(
            vendors,
            config,
            nigp_lookup=nigp_lookup,
            naics_lookup=naics_lookup,
        )
    except (TypeError, ValueError) as e:
        raise SystemExit(f"Enrichment failed: {e}")

    output = json.dumps(vendor_map, indent=2, default=str)
    _write_output(output, args.output, f"Certified: {len(vendor_map)} of {len(vendors)} vendors")


def _run_regions(args: argparse.Namespace) -> None:
    """Run regions command."""
    config = _load_config(args.config)
    for region in config.build_regions():
        codes = ", ".join(sorted(region.zip_codes))
        print(f"  {region.name} ({len(region.zip_codes)} zip codes): {codes}")


def _run_lookup(args: argparse.Namespace) -> None:
    """Run lookup command."""
    lookup = _load_lookup(args.table)
    output = json.dumps(lookup, indent=2)
    _write_output(output, args.output, f"Lookup: {len(lookup)} codes")


if __name__ == "__main__":
    main()
