"""LLM chains for business recommendations and business plan enhancement."""

import json
import math
from typing import Any

import openai

from app.core.config import Settings
from app.core.errors import RecommendationGenerationError, UpstreamServiceError
from app.core.llm import get_openai_client, parse_llm_json_dict
from app.core.logging import get_logger
from app.core.recommendation_inputs import build_analysis_prompt, build_enhance_plan_prompt
from app.core.schemas_projects import ProjectBundle
from app.core.schemas_recommendations import BusinessRecommendations

logger = get_logger(__name__)

DEFAULT_SCORE = 50

SCORE_FIELDS = ("overallScore", "marketScore", "productScore", "financialScore")
LIST_FIELDS = (
    "strengths",
    "weaknesses",
    "recommendations",
    "nextSteps",
    "riskFactors",
    "opportunities",
)


# ruff: noqa: E501
SYSTEM_PROMPT = """You are an expert business consultant and venture capitalist with 20+ years of experience in startup evaluation and business plan development.

Analyze the provided business information and provide a comprehensive evaluation. Your analysis should be:
- Objective and data-driven
- Actionable and specific
- Realistic about market conditions
- Focused on growth potential and scalability

Respond with valid JSON in this exact format:
{
  "overallScore": number (1-100),
  "marketScore": number (1-100),
  "productScore": number (1-100),
  "financialScore": number (1-100),
  "strengths": [array of 3-5 specific strengths],
  "weaknesses": [array of 3-5 specific weaknesses],
  "recommendations": [array of 5-7 actionable recommendations],
  "nextSteps": [array of 3-5 immediate next steps],
  "riskFactors": [array of 3-5 key risks to monitor],
  "opportunities": [array of 3-5 market opportunities to pursue]
}"""

ENHANCE_SYSTEM_PROMPT = (
    "You are an expert business plan writer and strategic consultant. "
    "Provide detailed, professional business plan enhancements."
)


def _clamp_score(value: Any) -> int:
    """Clamp a model score into 1..100; missing, zero or non-numeric means 50."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return DEFAULT_SCORE
    if isinstance(value, bool) or not isinstance(value, int | float) or not value:
        return DEFAULT_SCORE
    if math.isnan(value):
        return DEFAULT_SCORE
    # Infinities clamp before rounding
    return max(1, min(100, round(max(-1.0, min(101.0, value)))))


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def normalize_recommendations(raw: dict[str, Any]) -> BusinessRecommendations:
    """
    Coerce a parsed model reply into BusinessRecommendations.

    Scores are clamped to 1..100 and list fields that are absent or not
    lists become empty lists.
    """
    data: dict[str, Any] = {field: _clamp_score(raw.get(field)) for field in SCORE_FIELDS}
    data.update({field: _string_list(raw.get(field)) for field in LIST_FIELDS})
    return BusinessRecommendations.model_validate(data)


def generate_business_recommendations(
    bundle: ProjectBundle, settings: Settings
) -> BusinessRecommendations:
    """
    Ask the LLM for a structured evaluation of a project.

    Args:
        bundle: Project and whichever satellites exist
        settings: Application settings

    Returns:
        Normalized BusinessRecommendations

    Raises:
        RecommendationGenerationError: If the call fails, times out, or the
            reply is empty or not a JSON object
    """
    client = get_openai_client(settings)
    project_id = bundle.project.id
    prompt = build_analysis_prompt(bundle)
    model = settings.RECOMMENDATIONS_MODEL

    logger.info(
        f"Calling {model} for business recommendations",
        extra={"project_id": project_id},
    )

    try:
        response = client.chat.completions.create(
            model=model,
            temperature=settings.RECOMMENDATIONS_TEMPERATURE,
            max_tokens=settings.RECOMMENDATIONS_MAX_TOKENS,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
    except openai.APIError as e:
        logger.error(
            f"Recommendation call failed for project {project_id}: {e}",
            extra={"project_id": project_id},
        )
        raise RecommendationGenerationError(
            "Failed to generate AI recommendations. Please try again."
        ) from e

    raw_output = response.choices[0].message.content or ""
    if not raw_output.strip():
        logger.error(
            f"Empty recommendation reply for project {project_id}",
            extra={"project_id": project_id},
        )
        raise RecommendationGenerationError(
            "Failed to generate AI recommendations. Please try again."
        )

    try:
        parsed = parse_llm_json_dict(raw_output)
    except (json.JSONDecodeError, ValueError) as e:
        # Do NOT leak raw model output in exception
        logger.error(
            f"Recommendation reply was not a JSON object: {e}",
            extra={"project_id": project_id},
        )
        raise RecommendationGenerationError(
            "Failed to generate AI recommendations. Please try again."
        ) from e

    try:
        result = normalize_recommendations(parsed)
    except (ValueError, OverflowError) as e:
        logger.error(
            f"Recommendation reply could not be normalized: {e}",
            extra={"project_id": project_id},
        )
        raise RecommendationGenerationError(
            "Failed to generate AI recommendations. Please try again."
        ) from e

    logger.info(
        f"Generated recommendations for project {project_id} (overall {result.overall_score})",
        extra={"project_id": project_id},
    )
    return result


def enhance_business_plan(bundle: ProjectBundle, settings: Settings) -> str:
    """
    Ask the LLM for an enhanced business plan section.

    Args:
        bundle: Project and whichever satellites exist
        settings: Application settings

    Returns:
        Free-form plan text; empty if the model returned nothing

    Raises:
        UpstreamServiceError: If the call fails or times out
    """
    client = get_openai_client(settings)
    project_id = bundle.project.id
    model = settings.ENHANCE_PLAN_MODEL

    logger.info(f"Calling {model} for business plan enhancement", extra={"project_id": project_id})

    try:
        response = client.chat.completions.create(
            model=model,
            temperature=settings.ENHANCE_PLAN_TEMPERATURE,
            max_tokens=settings.ENHANCE_PLAN_MAX_TOKENS,
            messages=[
                {"role": "system", "content": ENHANCE_SYSTEM_PROMPT},
                {"role": "user", "content": build_enhance_plan_prompt(bundle)},
            ],
        )
    except openai.APIError as e:
        logger.error(
            f"Plan enhancement call failed for project {project_id}: {e}",
            extra={"project_id": project_id},
        )
        raise UpstreamServiceError("Failed to enhance business plan. Please try again.") from e

    return response.choices[0].message.content or ""
