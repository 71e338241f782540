"""Pydantic schemas for projects and project bundles."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from app.core.schemas_common import CamelModel
from app.core.schemas_evaluation import EvaluationResultsResponse
from app.core.schemas_financial import FinancialProjectionsResponse
from app.core.schemas_market_analysis import MarketAnalysisResponse
from app.core.schemas_product_details import ProductDetailsResponse

TargetMarket = Literal["b2c", "b2b", "b2g"]


def _dedupe(markets: list[str]) -> list[str]:
    seen: list[str] = []
    for market in markets:
        if market not in seen:
            seen.append(market)
    return seen


class CreateProjectRequest(CamelModel):
    """Request body for step 1 of the wizard (business basics)."""

    user_id: int | None = Field(None, description="Owning user id")
    name: str = Field(..., min_length=2, max_length=200, description="Business name")
    description: str = Field(..., min_length=10, description="Business description")
    industry: str = Field(..., min_length=1, description="Industry")
    stage: str = Field(..., min_length=1, description="Business stage")
    target_markets: list[TargetMarket] = Field(
        ..., min_length=1, description="Target market segments"
    )
    team_size: str = Field(..., min_length=1, description="Team size bucket")

    @field_validator("target_markets")
    @classmethod
    def unique_markets(cls, v: list[str]) -> list[str]:
        return _dedupe(v)


class UpdateProjectRequest(CamelModel):
    """Partial update for a project. Only fields present are applied."""

    user_id: int | None = None
    name: str | None = Field(None, min_length=2, max_length=200)
    description: str | None = Field(None, min_length=10)
    industry: str | None = Field(None, min_length=1)
    stage: str | None = Field(None, min_length=1)
    target_markets: list[TargetMarket] | None = Field(None, min_length=1)
    team_size: str | None = Field(None, min_length=1)

    @field_validator("target_markets")
    @classmethod
    def unique_markets(cls, v: list[str] | None) -> list[str] | None:
        return _dedupe(v) if v is not None else v


class ProjectResponse(CamelModel):
    """A stored project."""

    id: int
    user_id: int | None = None
    name: str
    description: str
    industry: str
    stage: str
    target_markets: list[str]
    team_size: str
    created_at: datetime


class ProjectBundle(CamelModel):
    """A project together with whichever satellite records exist."""

    project: ProjectResponse
    market_analysis: MarketAnalysisResponse | None = None
    product_details: ProductDetailsResponse | None = None
    financial_projections: FinancialProjectionsResponse | None = None
    evaluation_results: EvaluationResultsResponse | None = None
