"""
Extract Layer Schemas

Raw record schemas for data coming from the Users API.
These represent the structure of a user as jsonplaceholder returns it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


class RawModel(BaseModel):
    """Upstream records: extra keys are ignored, declared keys are checked"""

    model_config = ConfigDict(extra="ignore", frozen=True)


class RawGeo(RawModel):
    lat: StrictStr = Field(..., description="Latitude as a decimal string")
    lng: StrictStr = Field(..., description="Longitude as a decimal string")

    @field_validator("lat", "lng")
    @classmethod
    def validate_decimal(cls, v):
        """Coordinates are enriched to floats, so they must parse as one"""
        try:
            float(v)
        except ValueError:
            raise ValueError(f"not a decimal number: {v!r}")
        return v


class RawAddress(RawModel):
    street: StrictStr
    suite: StrictStr
    city: StrictStr
    zipcode: StrictStr
    geo: RawGeo


class RawCompany(RawModel):
    name: StrictStr
    catch_phrase: Optional[StrictStr] = Field(None, alias="catchPhrase")
    bs: Optional[StrictStr] = Field(None, description="Line of business")


class RawUser(RawModel):
    """Schema for a user record from GET /users and GET /users/{id}"""

    id: StrictInt = Field(..., description="Upstream identifier, the natural key")
    name: StrictStr = Field(..., description="Space-separated display name")
    username: StrictStr
    email: StrictStr
    phone: Optional[StrictStr] = None
    website: Optional[StrictStr] = None
    address: RawAddress
    company: RawCompany
