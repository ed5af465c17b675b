"""
Crustacean request and response schemas.

Payloads use camelCase keys on the wire (subGroup, averageSize, ...);
attributes stay snake_case in Python.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CreateCrustaceanRequest(BaseModel):
    """Crustacean creation request model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Norway Lobster",
                "subGroup": "Lobster",
                "description": "Slim orange lobster found on muddy sea beds",
                "habitat": "North-east Atlantic",
                "averageSize": 18.5,
                "scientificName": "Nephrops norvegicus",
            }
        },
    )

    name: str = Field(..., min_length=2, max_length=100, description="Common name (unique)")
    sub_group: str = Field(..., min_length=1, max_length=50, description="Sub-group, e.g. Lobster")
    description: str = Field(..., min_length=10, max_length=500, description="Short description")
    habitat: str = Field(..., min_length=5, max_length=200, description="Where the species lives")
    average_size: float = Field(..., ge=0.1, le=100, description="Average size in centimeters")
    scientific_name: str = Field(..., min_length=5, max_length=100, description="Binomial name")


class UpdateCrustaceanRequest(BaseModel):
    """Crustacean partial update request model. Omitted fields are left unchanged."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "habitat": "North Atlantic Ocean and North Sea",
                "averageSize": 30,
            }
        },
    )

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    sub_group: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, min_length=10, max_length=500)
    habitat: Optional[str] = Field(None, min_length=5, max_length=200)
    average_size: Optional[float] = Field(None, ge=0.1, le=100)
    scientific_name: Optional[str] = Field(None, min_length=5, max_length=100)

    def changes(self) -> dict:
        """Return only the fields the client actually supplied."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class CrustaceanFilters(BaseModel):
    """Listing filters and raw pagination parameters."""

    group: Optional[str] = None
    sub_group: Optional[str] = None
    limit: Optional[int] = None
    page: Optional[int] = None


class CrustaceanResponse(BaseModel):
    """Crustacean response model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int = Field(..., description="Crustacean ID")
    name: str
    group: str
    sub_group: str
    description: str
    habitat: str
    average_size: float
    scientific_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def serialize(cls, crustacean) -> dict:
        """Dump an ORM row into its camelCase JSON shape."""
        return cls.model_validate(crustacean).model_dump(by_alias=True)
