"""Tradie profile models."""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from tradiestop.models.base import BaseDataModel, Money, to_decimal


class CompanyDetails(BaseDataModel):
    """Business details printed on a tradie's invoices."""

    name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    tax_id: str = ""
    logo_url: str = ""


class Tradie(BaseDataModel):
    """Public profile of a service-providing user.

    Attributes:
        id: Same identifier as the tradie's User record
        profession: Trade, e.g. "Plumber"
        rating: Average review rating, 0 to 5
        reviews_count: Number of reviews received
        company_details: Details used on invoices
    """

    id: str = Field(..., min_length=1)
    name: str
    profession: str = ""
    rating: Money = Field(default=Decimal("0"), ge=0, le=5)
    availability: Optional[str] = None
    image_url: str = ""
    reviews_count: int = Field(default=0, ge=0)
    company_details: CompanyDetails = Field(default_factory=CompanyDetails)

    @field_validator("rating", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return to_decimal(v)
