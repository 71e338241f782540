"""Pydantic schemas for the market analysis step."""

from pydantic import ConfigDict, Field

from app.core.schemas_common import CamelModel


class Competitor(CamelModel):
    """One competitor row from the market analysis step."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Competitor name")
    strengths: str = Field(..., min_length=1, description="Competitor strengths")
    weaknesses: str = Field(..., min_length=1, description="Competitor weaknesses")


class CreateMarketAnalysisRequest(CamelModel):
    """Request body for step 2 of the wizard."""

    project_id: int = Field(..., description="Owning project id")
    target_customers: str = Field(..., min_length=10, description="Ideal customer segments")
    market_size: str = Field(..., min_length=1, description="Market size bucket")
    growth_rate: str = Field(..., min_length=1, description="Market growth bucket")
    competitors: list[Competitor] = Field(..., min_length=1, description="Known competitors")
    competitive_advantage: str = Field(..., min_length=10, description="Competitive advantage")


class UpdateMarketAnalysisRequest(CamelModel):
    """Partial update for a market analysis record."""

    target_customers: str | None = Field(None, min_length=10)
    market_size: str | None = Field(None, min_length=1)
    growth_rate: str | None = Field(None, min_length=1)
    competitors: list[Competitor] | None = Field(None, min_length=1)
    competitive_advantage: str | None = Field(None, min_length=10)


class MarketAnalysisResponse(CamelModel):
    """A stored market analysis record."""

    id: int
    project_id: int
    target_customers: str
    market_size: str
    growth_rate: str
    competitors: list[Competitor]
    competitive_advantage: str
