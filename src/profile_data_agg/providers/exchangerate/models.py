"""DTOs for ExchangeRate-API v6 (https://www.exchangerate-api.com/docs)."""
from pydantic import BaseModel, Field


class ExchangeRateLatestResponse(BaseModel):
    """Body of /{key}/latest/{base}; only the fields this service reads."""

    result: str | None = None
    base_code: str | None = None
    conversion_rates: dict[str, float] = Field(default_factory=dict)
