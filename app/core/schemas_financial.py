"""Pydantic schemas for the financial projections step."""

from typing import Annotated, Literal

from pydantic import ConfigDict, Field, model_validator

from app.core.projections import PROJECTION_YEARS, project_revenue
from app.core.schemas_common import CamelModel

RevenueStream = Literal[
    "product_sales",
    "subscription",
    "licensing",
    "advertising",
    "transaction_fees",
    "consulting",
    "affiliate",
]

Percentage = Annotated[float, Field(ge=0, le=100)]
# Stored as BIGINT
MAX_REVENUE = 2**63 - 1
MAX_GROWTH_RATE = 1000.0

RevenueAmount = Annotated[int, Field(ge=0, le=MAX_REVENUE)]

COST_SUM_TOLERANCE = 1.0


class OperatingCosts(CamelModel):
    """Operating cost split by category, as percentages of spend."""

    model_config = ConfigDict(extra="forbid")

    development: Percentage = 30.0
    marketing: Percentage = 20.0
    operations: Percentage = 30.0
    administration: Percentage = 20.0

    def total(self) -> float:
        return self.development + self.marketing + self.operations + self.administration

    def is_balanced(self) -> bool:
        """Whether the split sums to 100 within tolerance."""
        return abs(self.total() - 100) <= COST_SUM_TOLERANCE


ProjectedRevenue = Annotated[
    list[RevenueAmount],
    Field(min_length=PROJECTION_YEARS, max_length=PROJECTION_YEARS),
]


class _RevenueInputs(CamelModel):
    """Either an explicit projection or the inputs to compound one."""

    projected_revenue: ProjectedRevenue | None = Field(
        None, description="Five yearly revenue amounts"
    )
    revenue_year1: RevenueAmount | None = Field(
        None, description="First-year revenue used to compute the projection"
    )
    growth_rate: float | None = Field(
        None,
        ge=-100,
        le=MAX_GROWTH_RATE,
        allow_inf_nan=False,
        description="Annual growth percentage used to compute the projection",
    )

    @model_validator(mode="after")
    def fill_projection(self):
        if self.projected_revenue is None and self.revenue_year1 is not None:
            try:
                projected = project_revenue(self.revenue_year1, self.growth_rate or 0)
            except OverflowError as e:
                raise ValueError("Projected revenue is too large") from e
            if max(projected) > MAX_REVENUE:
                raise ValueError("Projected revenue is too large")
            self.projected_revenue = projected
        return self

    def to_row(self) -> dict:
        row = super().to_row()
        row.pop("revenue_year1", None)
        row.pop("growth_rate", None)
        if self.projected_revenue is not None:
            row["projected_revenue"] = list(self.projected_revenue)
        return row


class CreateFinancialProjectionsRequest(_RevenueInputs):
    """Request body for step 4 of the wizard."""

    project_id: int = Field(..., description="Owning project id")
    business_model: str = Field(..., min_length=1, description="Business model")
    revenue_streams: list[RevenueStream] = Field(..., min_length=1, description="Revenue streams")
    initial_investment: str = Field(..., min_length=1, description="Initial investment bucket")
    operating_costs: OperatingCosts = Field(default_factory=OperatingCosts)
    break_even_point: str = Field(..., min_length=1, description="Break-even bucket")

    @model_validator(mode="after")
    def require_projection(self):
        if self.projected_revenue is None and self.revenue_year1 is None:
            raise ValueError("Either projectedRevenue or revenueYear1 is required")
        return self

    def to_row(self) -> dict:
        row = super().to_row()
        row["operating_costs"] = self.operating_costs.model_dump(mode="json")
        return row


class UpdateFinancialProjectionsRequest(_RevenueInputs):
    """Partial update for a financial projections record."""

    business_model: str | None = Field(None, min_length=1)
    revenue_streams: list[RevenueStream] | None = Field(None, min_length=1)
    initial_investment: str | None = Field(None, min_length=1)
    operating_costs: OperatingCosts | None = None
    break_even_point: str | None = Field(None, min_length=1)

    def to_row(self) -> dict:
        row = super().to_row()
        if self.operating_costs is not None:
            row["operating_costs"] = self.operating_costs.model_dump(mode="json")
        return row


class FinancialProjectionsResponse(CamelModel):
    """A stored financial projections record."""

    id: int
    project_id: int
    business_model: str
    revenue_streams: list[str]
    initial_investment: str
    operating_costs: OperatingCosts
    break_even_point: str
    projected_revenue: list[int]
