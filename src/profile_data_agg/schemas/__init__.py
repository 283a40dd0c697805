"""Pydantic schemas for API responses. Request-scoped, never persisted.

Fields are snake_case in Python and camelCase on the wire. Absent upstream
values are the "N/A" sentinel, never null (NewsItem.image is the one
optional field).
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from profile_data_agg.utils import NOT_AVAILABLE


class ApiSchema(BaseModel):
    """Base schema: camelCase aliases, population by field name allowed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRecord(ApiSchema):
    """A random user flattened from the random-user API."""

    first_name: str = NOT_AVAILABLE
    last_name: str = NOT_AVAILABLE
    gender: str = NOT_AVAILABLE
    age: int | str = NOT_AVAILABLE
    dob: str = NOT_AVAILABLE  # raw ISO timestamp
    date_of_birth: str = NOT_AVAILABLE  # e.g. "March 5, 1990"
    city: str = NOT_AVAILABLE
    country: str = NOT_AVAILABLE
    address: str = NOT_AVAILABLE
    full_address: str = NOT_AVAILABLE
    profile_picture: str = NOT_AVAILABLE
    image: str = NOT_AVAILABLE


class CountryRecord(ApiSchema):
    """Country metadata from the first by-name match."""

    name: str = NOT_AVAILABLE
    country_name: str = NOT_AVAILABLE
    capital: str = NOT_AVAILABLE
    languages: str = NOT_AVAILABLE
    official_languages: str = NOT_AVAILABLE
    currency: str = NOT_AVAILABLE
    currency_code: str = NOT_AVAILABLE
    flag: str = NOT_AVAILABLE
    has_currency: bool = False


class FormattedRates(ApiSchema):
    """Display lines such as "1 EUR = 1.09 USD"."""

    usd: str
    kzt: str


class ExchangeRecord(ApiSchema):
    """USD and KZT rates for a base currency, as two-decimal strings."""

    usd: str = Field(default=NOT_AVAILABLE, alias="USD")
    kzt: str = Field(default=NOT_AVAILABLE, alias="KZT")
    base_currency: str | None = None
    formatted: FormattedRates | None = None
    error: str | None = None
    message: str | None = None


class NewsItem(ApiSchema):
    """A news headline reshaped from the news-search API."""

    title: str
    description: str = "No description available"
    image: str | None = None
    url: str = NOT_AVAILABLE
    source_url: str = NOT_AVAILABLE
    source: str = NOT_AVAILABLE
    published_at: str = NOT_AVAILABLE  # e.g. "October 18, 2026"


class ErrorBody(BaseModel):
    """JSON error body returned by every endpoint on failure."""

    error: str
    message: str


class ExchangeErrorBody(ErrorBody):
    """Exchange failure body; rates stay renderable as "N/A"."""

    USD: str = NOT_AVAILABLE
    KZT: str = NOT_AVAILABLE


__all__ = [
    "CountryRecord",
    "ErrorBody",
    "ExchangeErrorBody",
    "ExchangeRecord",
    "FormattedRates",
    "NewsItem",
    "UserRecord",
]
