"""Region model: a named group of postal codes."""

from collections.abc import Iterable
from dataclasses import dataclass, field

ZIP_CODE_LENGTH = 5


@dataclass(frozen=True)
class Region:
    """
    Named set of five-character postal codes.
    Codes are stored as a frozenset; the region cannot change after construction.
    """

    name: str
    zip_codes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Region name must be a string. Invalid value: {self.name!r}")
        if isinstance(self.zip_codes, (str, bytes)) or not isinstance(self.zip_codes, Iterable):
            raise TypeError(
                f"Region zip_codes must be a collection of strings. Invalid value: {self.zip_codes!r}"
            )

        codes = frozenset(self.zip_codes)
        for code in codes:
            if not isinstance(code, str):
                raise TypeError(f"Zip code must be a string. Invalid value: {code!r}")
            if len(code) != ZIP_CODE_LENGTH:
                raise ValueError(
                    f"Zip code must be {ZIP_CODE_LENGTH} characters long. Invalid value: {code!r}"
                )
        object.__setattr__(self, "zip_codes", codes)

    def contains(self, zip_code: object) -> bool:
        """True if zip_code is one of this region's postal codes."""
        return isinstance(zip_code, str) and zip_code in self.zip_codes
