from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from freight_quotes.core.enums import SenderKind, ParcelType, ParcelOption
from freight_quotes.utils.sanitize import sanitize_input


class Sender(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: SenderKind = Field(alias="type")
    name: str
    phone: str
    email: str

    @field_validator("name", "phone", "email")
    @classmethod
    def _sanitize(cls, value: str) -> str:
        return sanitize_input(value)


class Address(BaseModel):
    address: str
    city: str
    country: str

    @field_validator("address", "city", "country")
    @classmethod
    def _sanitize(cls, value: str) -> str:
        return sanitize_input(value)


class Parcel(BaseModel):
    type: ParcelType
    weight_kg: float = Field(allow_inf_nan=False)
    declared_value: float = Field(default=0.0, allow_inf_nan=False)
    options: List[ParcelOption] = []

    def has_option(self, option: ParcelOption) -> bool:
        return option in self.options


class QuoteRequest(BaseModel):
    sender: Optional[Sender] = None
    pickup: Optional[Address] = None
    delivery: Optional[Address] = None
    parcel: Optional[Parcel] = None


class ValidatedQuoteRequest(BaseModel):
    sender: Sender
    pickup: Address
    delivery: Address
    parcel: Parcel


class QuoteBreakdown(BaseModel):
    base: float
    weight: float
    type_multiplier: float
    options: List[ParcelOption]


class QuoteResult(BaseModel):
    quote_id: UUID
    amount: float
    currency: str
    estimated_delivery: datetime
    breakdown: QuoteBreakdown

    @property
    def price(self) -> str:
        return f"{self.amount:.2f}"


class QuoteResponse(BaseModel):
    quote_id: str
    price: str
    currency: str
    estimated_delivery: str
    breakdown: QuoteBreakdown
