"""
Transformation Layer Schemas

Enriched user view-model. Attributes are snake_case in Python and serialize
to the camelCase keys the UI consumes (`model_dump(by_alias=True)`).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ViewModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class Hair(ViewModel):
    color: str
    type: str


class Coordinates(ViewModel):
    lat: float
    lng: float


class Address(ViewModel):
    address: str = Field(..., description="Street line")
    city: str
    state: str = Field(..., description="Upstream suite, shown as state")
    state_code: str = Field(..., description="First two characters of the zipcode")
    postal_code: str
    coordinates: Coordinates
    country: str


class Bank(ViewModel):
    card_expire: str
    card_number: str
    card_type: str
    currency: str
    iban: str


class Company(ViewModel):
    department: str
    name: str
    title: str
    address: Address


class Crypto(ViewModel):
    coin: str
    wallet: str
    network: str


class EnrichedUser(ViewModel):
    """Denormalized, UI-ready user record"""

    id: int
    first_name: str
    last_name: str
    maiden_name: str
    age: int
    gender: str
    email: str
    phone: Optional[str]
    username: str
    website: Optional[str]
    password: str
    birth_date: str
    image: str
    blood_group: str
    height: int
    weight: int
    eye_color: str
    hair: Hair
    ip: str
    address: Address
    mac_address: str
    university: str
    bank: Bank
    company: Company
    ein: str
    ssn: str
    user_agent: str
    crypto: Crypto
    role: str
