"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from rebalance_advisor.domain.models import AssetCategory, Currency


class AssetSchema(BaseModel):
    """A single holding."""

    symbol: str = Field(..., min_length=1, max_length=40)
    name: str = Field(..., min_length=1, max_length=200)
    category: AssetCategory = AssetCategory.OTHER
    current_value: Decimal = Field(..., ge=0, description="Market value in portfolio currency")
    shares: Optional[Decimal] = Field(default=None, ge=0)
    price: Optional[Decimal] = Field(default=None, ge=0)
    currency: Optional[str] = None
    isin: Optional[str] = None
    nemo_local: Optional[str] = Field(default=None, description="Chilean exchange ticker")

    @field_validator("symbol", "name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class PortfolioCreateRequest(BaseModel):
    """Request schema for creating a portfolio from holdings."""

    client_name: str = Field(..., min_length=1, max_length=200)
    profile_id: str = Field(..., description="Investment profile to measure against")
    currency: Currency = Currency.USD
    assets: list[AssetSchema] = Field(..., min_length=1)
    last_updated: Optional[datetime] = Field(
        default=None,
        description="Statement date; defaults to now",
    )


class PortfolioResponse(BaseModel):
    """Response schema for a portfolio."""

    portfolio_id: str
    client_name: str
    profile_id: str
    currency: Currency
    total_value: Decimal
    last_updated: Optional[datetime] = None
    assets: list[AssetSchema]


class PortfolioListResponse(BaseModel):
    """Response schema for portfolio listing."""

    portfolios: list[PortfolioResponse]
    total: int


class PortfolioImportResponse(BaseModel):
    """Response schema for a holdings file import."""

    portfolio: PortfolioResponse
    imported: int
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
