"""Pydantic schemas for AI-generated business recommendations."""

from typing import Annotated

from pydantic import Field

from app.core.schemas_common import CamelModel

AiScore = Annotated[int, Field(ge=1, le=100)]


class BusinessRecommendations(CamelModel):
    """Normalized LLM evaluation of a project."""

    overall_score: AiScore
    market_score: AiScore
    product_score: AiScore
    financial_score: AiScore
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    risk_factors: list[str] = Field(default_factory=list)
    opportunities: list[str] = Field(default_factory=list)


class EnhancedPlanResponse(CamelModel):
    """LLM-enhanced business plan section."""

    enhanced_plan: str
