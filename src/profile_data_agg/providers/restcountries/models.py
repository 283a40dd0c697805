"""DTOs for the REST Countries v3.1 API (https://restcountries.com)."""
from pydantic import BaseModel, Field


class RestCountryName(BaseModel):
    common: str | None = None
    official: str | None = None


class RestCountryFlags(BaseModel):
    png: str | None = None
    svg: str | None = None


class RestCountry(BaseModel):
    """One element of the by-name lookup result array.

    ``languages`` and ``currencies`` keep upstream key order, so the first
    currency key is the one the API lists first.
    """

    name: RestCountryName = Field(default_factory=RestCountryName)
    capital: list[str] | None = None
    languages: dict[str, str] | None = None
    currencies: dict[str, dict] | None = None
    flags: RestCountryFlags = Field(default_factory=RestCountryFlags)


class RestCountriesByNameParams(BaseModel):
    """Query params for /name/{name}; partial names are allowed."""

    full_text: str = Field(default="false", serialization_alias="fullText")
