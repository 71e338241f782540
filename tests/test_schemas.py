"""Tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from app.core.schemas_evaluation import CreateEvaluationResultsRequest
from app.core.schemas_financial import (
    MAX_REVENUE,
    CreateFinancialProjectionsRequest,
    OperatingCosts,
    UpdateFinancialProjectionsRequest,
)
from app.core.schemas_market_analysis import CreateMarketAnalysisRequest
from app.core.schemas_projects import CreateProjectRequest, UpdateProjectRequest

FINANCIAL_BASE = {
    "projectId": 1,
    "businessModel": "subscription",
    "revenueStreams": ["subscription"],
    "initialInvestment": "100k_500k",
    "breakEvenPoint": "1_2_years",
}


class TestProjectSchemas:
    def test_accepts_camel_case_and_dedupes_markets(self):
        body = CreateProjectRequest.model_validate(
            {
                "name": "Acme",
                "description": "Robots that fold laundry.",
                "industry": "technology",
                "stage": "idea",
                "targetMarkets": ["b2c", "b2b", "b2c"],
                "teamSize": "2_5",
            }
        )

        assert body.target_markets == ["b2c", "b2b"]
        assert "user_id" not in body.to_row()

    def test_rejects_unknown_market(self):
        with pytest.raises(ValidationError):
            CreateProjectRequest.model_validate(
                {
                    "name": "Acme",
                    "description": "Robots that fold laundry.",
                    "industry": "technology",
                    "stage": "idea",
                    "targetMarkets": ["b2x"],
                    "teamSize": "2_5",
                }
            )

    def test_update_row_contains_only_sent_fields(self):
        body = UpdateProjectRequest.model_validate({"stage": "mvp"})

        assert body.to_row() == {"stage": "mvp"}


class TestMarketAnalysisSchemas:
    def test_competitor_rows_reject_unknown_keys(self):
        with pytest.raises(ValidationError):
            CreateMarketAnalysisRequest.model_validate(
                {
                    "projectId": 1,
                    "targetCustomers": "Busy urban parents",
                    "marketSize": "1b_10b",
                    "growthRate": "moderate",
                    "competitors": [{"name": "X", "strengths": "s", "weaknesses": "w", "url": "u"}],
                    "competitiveAdvantage": "Patented folding arm",
                }
            )

    def test_requires_at_least_one_competitor(self):
        with pytest.raises(ValidationError):
            CreateMarketAnalysisRequest.model_validate(
                {
                    "projectId": 1,
                    "targetCustomers": "Busy urban parents",
                    "marketSize": "1b_10b",
                    "growthRate": "moderate",
                    "competitors": [],
                    "competitiveAdvantage": "Patented folding arm",
                }
            )


class TestFinancialSchemas:
    def test_operating_cost_defaults_are_balanced(self):
        costs = OperatingCosts()

        assert costs.total() == 100
        assert costs.is_balanced()

    def test_unbalanced_costs_are_detected(self):
        costs = OperatingCosts(development=50, marketing=50, operations=50, administration=0)

        assert not costs.is_balanced()

    def test_cost_outside_percentage_range_is_rejected(self):
        with pytest.raises(ValidationError):
            OperatingCosts(development=120)

    def test_projection_computed_from_first_year_and_growth(self):
        body = CreateFinancialProjectionsRequest.model_validate(
            {**FINANCIAL_BASE, "revenueYear1": 100000, "growthRate": 20}
        )
        row = body.to_row()

        assert row["projected_revenue"] == [100000, 120000, 144000, 172800, 207360]
        assert "revenue_year1" not in row
        assert "growth_rate" not in row
        assert row["operating_costs"] == {
            "development": 30,
            "marketing": 20,
            "operations": 30,
            "administration": 20,
        }

    def test_explicit_projection_wins(self):
        body = CreateFinancialProjectionsRequest.model_validate(
            {**FINANCIAL_BASE, "projectedRevenue": [1, 2, 3, 4, 5], "revenueYear1": 100}
        )

        assert body.projected_revenue == [1, 2, 3, 4, 5]

    def test_projection_is_required(self):
        with pytest.raises(ValidationError):
            CreateFinancialProjectionsRequest.model_validate(FINANCIAL_BASE)

    @pytest.mark.parametrize("revenue", [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6], [1, 2, -3, 4, 5]])
    def test_projection_must_be_five_non_negative_amounts(self, revenue):
        with pytest.raises(ValidationError):
            CreateFinancialProjectionsRequest.model_validate(
                {**FINANCIAL_BASE, "projectedRevenue": revenue}
            )

    @pytest.mark.parametrize("growth", [1e100, 1000.5])
    def test_growth_rate_is_bounded(self, growth):
        with pytest.raises(ValidationError):
            CreateFinancialProjectionsRequest.model_validate(
                {**FINANCIAL_BASE, "revenueYear1": 1000, "growthRate": growth}
            )

    def test_compounded_projection_must_fit_bigint(self):
        with pytest.raises(ValidationError, match="Projected revenue is too large"):
            CreateFinancialProjectionsRequest.model_validate(
                {**FINANCIAL_BASE, "revenueYear1": MAX_REVENUE, "growthRate": 1000}
            )

    def test_explicit_amount_above_bigint_is_rejected(self):
        with pytest.raises(ValidationError):
            CreateFinancialProjectionsRequest.model_validate(
                {**FINANCIAL_BASE, "projectedRevenue": [1, 2, 3, 4, MAX_REVENUE + 1]}
            )

    def test_update_keeps_every_cost_key(self):
        body = UpdateFinancialProjectionsRequest.model_validate(
            {"operatingCosts": {"marketing": 40}}
        )

        assert body.to_row() == {
            "operating_costs": {
                "development": 30,
                "marketing": 40,
                "operations": 30,
                "administration": 20,
            }
        }


class TestEvaluationSchemas:
    def test_requires_answers_or_all_subscores(self):
        with pytest.raises(ValidationError):
            CreateEvaluationResultsRequest.model_validate(
                {"projectId": 1, "marketScore": 50, "productScore": 60}
            )

    def test_accepts_subscores_without_answers(self):
        body = CreateEvaluationResultsRequest.model_validate(
            {"projectId": 1, "marketScore": 50, "productScore": 60, "financialScore": 60}
        )

        assert body.overall_score is None
        assert body.answer_map() == {}

    def test_scores_above_100_are_rejected(self):
        with pytest.raises(ValidationError):
            CreateEvaluationResultsRequest.model_validate(
                {"projectId": 1, "marketScore": 150, "productScore": 60, "financialScore": 60}
            )
