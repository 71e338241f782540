"""Tests for AI recommendation chains with a mocked OpenAI client."""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from app.chains.business_recommendations import (
    enhance_business_plan,
    generate_business_recommendations,
    normalize_recommendations,
)
from app.core.config import get_settings
from app.core.errors import RecommendationGenerationError, UpstreamServiceError
from app.core.recommendation_inputs import build_analysis_prompt, build_enhance_plan_prompt
from app.core.schemas_market_analysis import Competitor, MarketAnalysisResponse
from app.core.schemas_projects import ProjectBundle, ProjectResponse
from app.main import app

client = TestClient(app)

GOOD_REPLY = {
    "overallScore": 72,
    "marketScore": 80,
    "productScore": 65,
    "financialScore": 70,
    "strengths": ["Clear niche"],
    "weaknesses": ["Thin margins"],
    "recommendations": ["Pilot with laundromats"],
    "nextSteps": ["Build prototype"],
    "riskFactors": ["Hardware recalls"],
    "opportunities": ["Hotel chains"],
}


def make_bundle(with_market: bool = False) -> ProjectBundle:
    project = ProjectResponse(
        id=5,
        name="Acme Laundry",
        description="Robots that fold laundry.",
        industry="technology",
        stage="idea",
        target_markets=["b2c"],
        team_size="2_5",
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    market = None
    if with_market:
        market = MarketAnalysisResponse(
            id=1,
            project_id=5,
            target_customers="Busy urban households",
            market_size="1b_10b",
            growth_rate="moderate",
            competitors=[Competitor(name="FoldCo", strengths="Brand", weaknesses="Price")],
            competitive_advantage="Patented folding arm",
        )
    return ProjectBundle(project=project, market_analysis=market)


def completion(content: str | None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


def timeout_error() -> openai.APITimeoutError:
    return openai.APITimeoutError(
        request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    )


@pytest.fixture
def mock_openai():
    """Patch the OpenAI client factory used by the chains."""
    with patch("app.chains.business_recommendations.get_openai_client") as factory:
        llm = MagicMock()
        factory.return_value = llm
        yield llm


class TestPrompts:
    def test_analysis_prompt_includes_only_present_sections(self):
        prompt = build_analysis_prompt(make_bundle())

        assert prompt.startswith("Business Analysis Request:")
        assert "COMPANY OVERVIEW:" in prompt
        assert "- Business Name: Acme Laundry" in prompt
        assert "MARKET ANALYSIS:" not in prompt
        assert "FINANCIAL PROJECTIONS:" not in prompt

    def test_analysis_prompt_serializes_competitors(self):
        prompt = build_analysis_prompt(make_bundle(with_market=True))

        assert "MARKET ANALYSIS:" in prompt
        assert '"name": "FoldCo"' in prompt

    def test_enhance_prompt_lists_six_items(self):
        prompt = build_enhance_plan_prompt(make_bundle())

        assert "1. Refined value proposition" in prompt
        assert "6. Growth and scaling recommendations" in prompt


class TestNormalize:
    def test_scores_are_clamped_and_defaulted(self):
        result = normalize_recommendations(
            {"overallScore": 150, "marketScore": -5, "productScore": "high"}
        )

        assert result.overall_score == 100
        assert result.market_score == 1
        assert result.product_score == 50
        assert result.financial_score == 50

    def test_numeric_string_scores_are_coerced(self):
        result = normalize_recommendations(
            {"overallScore": "85", "marketScore": " 72.6 ", "productScore": "0", "financialScore": "250"}
        )

        assert result.overall_score == 85
        assert result.market_score == 73
        assert result.product_score == 50
        assert result.financial_score == 100

    def test_non_finite_scores(self):
        raw = json.loads(
            '{"overallScore": NaN, "marketScore": Infinity, "productScore": -Infinity, "financialScore": 70}'
        )

        result = normalize_recommendations(raw)

        assert result.overall_score == 50
        assert result.market_score == 100
        assert result.product_score == 1
        assert result.financial_score == 70

    def test_non_list_fields_become_empty(self):
        result = normalize_recommendations({**GOOD_REPLY, "strengths": "lots", "nextSteps": None})

        assert result.strengths == []
        assert result.next_steps == []
        assert result.opportunities == ["Hotel chains"]


class TestGenerate:
    def test_success(self, mock_openai):
        mock_openai.chat.completions.create.return_value = completion(json.dumps(GOOD_REPLY))

        result = generate_business_recommendations(make_bundle(), get_settings())

        assert result.overall_score == 72
        assert result.risk_factors == ["Hardware recalls"]
        kwargs = mock_openai.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["model"] == get_settings().RECOMMENDATIONS_MODEL

    def test_fenced_reply_is_parsed(self, mock_openai):
        fenced = f"```json\n{json.dumps(GOOD_REPLY)}\n```"
        mock_openai.chat.completions.create.return_value = completion(fenced)

        result = generate_business_recommendations(make_bundle(), get_settings())

        assert result.market_score == 80

    @pytest.mark.parametrize("content", [None, "", "not json", "[1, 2]"])
    def test_unusable_reply_raises(self, mock_openai, content):
        mock_openai.chat.completions.create.return_value = completion(content)

        with pytest.raises(RecommendationGenerationError):
            generate_business_recommendations(make_bundle(), get_settings())

    def test_timeout_raises_retryable_error(self, mock_openai):
        mock_openai.chat.completions.create.side_effect = timeout_error()

        with pytest.raises(RecommendationGenerationError) as exc_info:
            generate_business_recommendations(make_bundle(), get_settings())

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 502

    def test_reply_that_cannot_be_normalized_raises(self, mock_openai):
        mock_openai.chat.completions.create.return_value = completion(json.dumps(GOOD_REPLY))

        with patch(
            "app.chains.business_recommendations.normalize_recommendations",
            side_effect=OverflowError("int too large"),
        ):
            with pytest.raises(RecommendationGenerationError):
                generate_business_recommendations(make_bundle(), get_settings())


class TestEnhance:
    def test_returns_plan_text(self, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("## Value Proposition")

        assert enhance_business_plan(make_bundle(), get_settings()) == "## Value Proposition"

    def test_upstream_failure(self, mock_openai):
        mock_openai.chat.completions.create.side_effect = timeout_error()

        with pytest.raises(UpstreamServiceError):
            enhance_business_plan(make_bundle(), get_settings())


class TestEndpoints:
    @pytest.fixture
    def project(self, fake_db):
        return fake_db.seed(
            "projects",
            {
                "name": "Acme Laundry",
                "description": "Robots that fold laundry.",
                "industry": "technology",
                "stage": "idea",
                "target_markets": ["b2c"],
                "team_size": "2_5",
            },
        )

    def test_recommendations_endpoint(self, mock_openai, project):
        mock_openai.chat.completions.create.return_value = completion(json.dumps(GOOD_REPLY))

        response = client.post(f"/api/ai/recommendations/{project['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["overallScore"] == 72
        assert data["nextSteps"] == ["Build prototype"]

    def test_upstream_failure_is_502(self, mock_openai, project):
        mock_openai.chat.completions.create.side_effect = timeout_error()

        response = client.post(f"/api/ai/recommendations/{project['id']}")

        assert response.status_code == 502
        assert response.json()["retryable"] is True

    def test_non_finite_scores_in_reply(self, mock_openai, project):
        reply = json.dumps({**GOOD_REPLY, "overallScore": float("nan"), "marketScore": float("inf")})
        mock_openai.chat.completions.create.return_value = completion(reply)

        response = client.post(f"/api/ai/recommendations/{project['id']}")

        assert response.status_code == 200
        assert response.json()["overallScore"] == 50
        assert response.json()["marketScore"] == 100

    def test_missing_project_is_404(self, mock_openai, fake_db):
        response = client.post("/api/ai/recommendations/42")

        assert response.status_code == 404
        mock_openai.chat.completions.create.assert_not_called()

    def test_enhance_plan_endpoint(self, mock_openai, project):
        mock_openai.chat.completions.create.return_value = completion("Enhanced plan")

        response = client.post(f"/api/ai/enhance-plan/{project['id']}")

        assert response.status_code == 200
        assert response.json() == {"enhancedPlan": "Enhanced plan"}
