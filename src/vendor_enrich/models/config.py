"""Vendor dataset configuration: property-name mapping and region definitions."""

from enum import Enum
from pathlib import Path

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, ConfigDict, Field, field_validator

from vendor_enrich.models.classification import ClassificationFamily
from vendor_enrich.models.region import ZIP_CODE_LENGTH, Region

CERTIFICATION_SUFFIX = "StartDate"


class CertificationFlag(str, Enum):
    """Certification programs tracked by the dataset."""

    ACDBE = "acdbe"
    DBE = "dbe"
    ESO = "eso"
    MICRO = "micro"
    MINORITY = "minority"
    SERVICE = "service"
    SMALL = "small"
    WOMAN = "woman"


class VendorField(str, Enum):
    """Semantic vendor fields whose record keys come from configuration."""

    UNIQUE_VENDOR_ID = "unique_vendor_id"
    CERTIFICATION_NUMBER = "certification_number"
    ZIP = "zip"
    NIGP_SOURCE = "nigp_source"
    NIGP_CODES = "nigp_codes"
    NAICS_SOURCE = "naics_source"
    NAICS_CODES = "naics_codes"


DEFAULT_CERTIFICATION_FLAGS = [
    CertificationFlag.MICRO,
    CertificationFlag.MINORITY,
    CertificationFlag.SMALL,
    CertificationFlag.WOMAN,
]


class RegionDefinition(BaseModel):
    """Region entry as written in a config file."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    zip_codes: list[str] = Field(default_factory=list, alias="zipCodes")

    @field_validator("zip_codes")
    @classmethod
    def _check_zip_length(cls, codes: list[str]) -> list[str]:
        for code in codes:
            if len(code) != ZIP_CODE_LENGTH:
                raise ValueError(f"zip code {code!r} must be {ZIP_CODE_LENGTH} characters long")
        return codes

    def to_region(self) -> Region:
        return Region(self.name, frozenset(self.zip_codes))


def _default_regions() -> list[RegionDefinition]:
    return [
        RegionDefinition(
            name="New River Valley",
            zip_codes=["24068", "24073", "24061", "24060", "24141", "24142", "24143"],
        ),
        RegionDefinition(
            name="Roanoke Valley",
            zip_codes=[
                "24011", "24012", "24013", "24014", "24015",
                "24016", "24017", "24018", "24019",
            ],
        ),
    ]


class VendorConfig(BaseModel):
    """
    Names of the vendor record properties the enrichment steps read and write.
    Accepts the legacy camelCase keys (uniqueVendorIdProperty, ...) or snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    unique_vendor_id_property: str = Field("vendorId", alias="uniqueVendorIdProperty")
    certification_number_property: str = Field(
        "certificationNumber", alias="certificationNumberProperty"
    )

    is_certified_acdbe_property: str = Field("acdbeStartDate", alias="isCertifiedACDBEProperty")
    is_certified_dbe_property: str = Field("dbeStartDate", alias="isCertifiedDBEProperty")
    is_certified_eso_property: str = Field("esoStartDate", alias="isCertifiedESOProperty")
    is_certified_micro_property: str = Field("microStartDate", alias="isCertifiedMicroProperty")
    is_certified_minority_property: str = Field(
        "minorityOwnedStartDate", alias="isCertifiedMinorityProperty"
    )
    is_certified_service_property: str = Field(
        "serviceDisabledVeteranStartDate", alias="isCertifiedServiceProperty"
    )
    is_certified_small_property: str = Field("smallStartDate", alias="isCertifiedSmallProperty")
    is_certified_woman_property: str = Field("womanOwnedStartDate", alias="isCertifiedWomanProperty")

    certification_flags: list[CertificationFlag] = Field(
        default_factory=lambda: list(DEFAULT_CERTIFICATION_FLAGS),
        alias="certificationFlags",
        description="Flags evaluated by the pipeline, in output order",
    )

    naics_codes_property: str = Field("naicsCode", alias="naicsCodesProperty")
    naics_description_property: str = Field("naicsDescription", alias="naicsDescriptionProperty")
    naics_source_property: str = Field("naicsCodes", alias="naicsSourceProperty")
    nigp_codes_property: str = Field("nigpCode", alias="nigpCodesProperty")
    nigp_description_property: str = Field("nigpDescription", alias="nigpDescriptionProperty")
    nigp_source_property: str = Field("nigpCodes", alias="nigpSourceProperty")

    zip_property: str = Field("zip", alias="zipProperty")

    regions: list[RegionDefinition] = Field(default_factory=_default_regions)

    def flag_property(self, flag: CertificationFlag) -> str:
        """Record key holding the start date for one certification program."""
        return getattr(self, f"is_certified_{flag.value}_property")

    def certification_properties(self) -> list[str]:
        """Configured flag property names, in order, without duplicates."""
        names = [self.flag_property(flag) for flag in self.certification_flags]
        return list(dict.fromkeys(names))

    def field_keys(self) -> dict[VendorField, str]:
        """Resolve every semantic vendor field to its record key."""
        return {
            VendorField.UNIQUE_VENDOR_ID: self.unique_vendor_id_property,
            VendorField.CERTIFICATION_NUMBER: self.certification_number_property,
            VendorField.ZIP: self.zip_property,
            VendorField.NIGP_SOURCE: self.nigp_source_property,
            VendorField.NIGP_CODES: self.nigp_codes_property,
            VendorField.NAICS_SOURCE: self.naics_source_property,
            VendorField.NAICS_CODES: self.naics_codes_property,
        }

    def build_regions(self) -> list[Region]:
        return [definition.to_region() for definition in self.regions]

    def nigp_family(self) -> ClassificationFamily:
        return ClassificationFamily(
            name="nigp",
            source_property=self.nigp_source_property,
            destination_property=self.nigp_codes_property,
        )

    def naics_family(self) -> ClassificationFamily:
        return ClassificationFamily(
            name="naics",
            source_property=self.naics_source_property,
            destination_property=self.naics_codes_property,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "VendorConfig":
        """Load config from YAML file. Property names may sit under a 'properties' section or at top level."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        flat: dict = dict(data.get("properties") or {})
        flat.update({k: v for k, v in data.items() if k != "properties"})
        return cls.model_validate(flat)
