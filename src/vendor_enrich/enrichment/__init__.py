"""Stateless enrichment steps: flag coercion, region assignment, classification expansion."""

from .classification import append_supplier_type_information, build_lookup, expand_codes
from .coercion import coerce_bool, convert_properties_to_boolean
from .regions import add_region_property, match_region

__all__ = [
    "add_region_property",
    "append_supplier_type_information",
    "build_lookup",
    "coerce_bool",
    "convert_properties_to_boolean",
    "expand_codes",
    "match_region",
]
