"""Classification code models (NIGP, NAICS)."""

from pydantic import BaseModel, ConfigDict, Field


class ClassificationCode(BaseModel):
    """One row of a classification code table."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Code as it appears in vendor records, e.g. '00505'")
    description: str = ""


class ClassificationFamily(BaseModel):
    """
    A code system expanded from a raw vendor field.
    source_property holds the pipe-delimited codes; destination_property
    receives the list of {id, description} entries.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Family label, e.g. 'nigp' or 'naics'")
    source_property: str
    destination_property: str
