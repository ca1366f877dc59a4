"""Boolean coercion of certification flag fields."""

from collections.abc import MutableMapping
from numbers import Number
from typing import Any


def coerce_bool(value: Any) -> bool:
    """
    Coerce a raw field value to bool.
    False for: None, False, the empty string, numeric zero, NaN.
    Everything else is True, including whitespace-only strings, "0",
    and empty lists or dicts.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value != ""
    if isinstance(value, Number):
        # NaN compares unequal to itself
        return value == value and value != 0
    return True


def _check_properties(properties: Any) -> None:
    if isinstance(properties, (str, bytes)) or not isinstance(properties, (list, tuple)):
        raise TypeError(
            f"Parameter 'properties' must be a list of strings. Invalid value: {properties!r}"
        )
    for prop in properties:
        if not isinstance(prop, str):
            raise TypeError(f"Each property must be a string. Invalid value: {prop!r}")


def convert_properties_to_boolean(
    record: MutableMapping[str, Any],
    properties: list[str] | tuple[str, ...],
) -> MutableMapping[str, Any]:
    """
    Replace each named property on record with its coerce_bool value.
    Missing properties are written as False. Returns the same record.
    Arguments are validated before the record is touched.
    """
    if not isinstance(record, MutableMapping):
        raise TypeError(f"Parameter 'record' must be a mutable mapping. Invalid value: {record!r}")
    _check_properties(properties)

    for prop in properties:
        record[prop] = coerce_bool(record.get(prop))
    return record
