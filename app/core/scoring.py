"""
Questionnaire scoring engine.

Maps the five 1-5 self-assessment answers from the final wizard step onto
three 0-100 sub-scores, an overall score, and fixed-copy strengths,
weaknesses and recommendations. Pure: no I/O and no state.
"""

import math
from collections.abc import Mapping

from app.core.errors import InvalidAnswerError, MissingAnswerError, OutOfRangeError
from app.core.schemas_evaluation import ScoreCard

MARKET_POTENTIAL = "market_potential"
COMPETITION_INTENSITY = "competition_intensity"
PRODUCT_DIFFERENTIATION = "product_differentiation"
SCALABILITY_POTENTIAL = "scalability_potential"
TEAM_EXPERIENCE = "team_experience"

QUESTION_IDS = (
    MARKET_POTENTIAL,
    COMPETITION_INTENSITY,
    PRODUCT_DIFFERENTIATION,
    SCALABILITY_POTENTIAL,
    TEAM_EXPERIENCE,
)

QUESTIONS = {
    MARKET_POTENTIAL: "Rate the market growth potential on a scale of 1-5",
    COMPETITION_INTENSITY: "Rate the intensity of competition on a scale of 1-5",
    PRODUCT_DIFFERENTIATION: "Rate how differentiated your product/service is on a scale of 1-5",
    SCALABILITY_POTENTIAL: "Rate your business model scalability on a scale of 1-5",
    TEAM_EXPERIENCE: "Rate your team's relevant industry experience on a scale of 1-5",
}

MIN_ANSWER = 1
MAX_ANSWER = 5
POINTS_PER_STEP = 20
STRENGTH_THRESHOLD = 70

# (strength, weakness, targeted recommendation) per sub-score
MARKET_COPY = (
    "Strong market opportunity",
    "Market potential needs further validation",
    "Conduct additional market research to validate demand and identify niche opportunities",
)
PRODUCT_COPY = (
    "Compelling product differentiation",
    "Product uniqueness could be improved",
    "Focus on enhancing your unique value proposition to differentiate from competitors",
)
TEAM_COPY = (
    "Experienced team with industry knowledge",
    "Team may need additional expertise or advisors",
    "Consider bringing on advisors or team members with more industry experience",
)

GENERAL_RECOMMENDATIONS = (
    "Develop a detailed go-to-market strategy focusing on early adopters",
    "Start with a minimal viable product to test market assumptions before full launch",
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return math.floor(value + 0.5)


def parse_answer(question_id: str, raw: int | str | None) -> int:
    """
    Parse and bounds-check a single answer.

    Raises:
        MissingAnswerError: If the answer is absent or blank
        InvalidAnswerError: If the answer is not an integer
        OutOfRangeError: If the answer is outside 1-5
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise MissingAnswerError(question_id)
    if isinstance(raw, bool):
        raise InvalidAnswerError(question_id, raw)
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError as e:
            raise InvalidAnswerError(question_id, raw) from e
    if not MIN_ANSWER <= value <= MAX_ANSWER:
        raise OutOfRangeError(question_id, value, MIN_ANSWER, MAX_ANSWER)
    return value


def parse_answers(answers: Mapping[str, int | str | None]) -> dict[str, int]:
    """Validate all five answers, in question order. Extra keys are ignored."""
    parsed: dict[str, int] = {}
    for question_id in QUESTION_IDS:
        if question_id not in answers:
            raise MissingAnswerError(question_id)
        parsed[question_id] = parse_answer(question_id, answers[question_id])
    return parsed


def overall_from_subscores(market_score: int, product_score: int, financial_score: int) -> int:
    """Aggregate score: the rounded mean of the three sub-scores."""
    return round_half_up((market_score + product_score + financial_score) / 3)


def _scale(answer: int) -> int:
    return answer * POINTS_PER_STEP


def compute_scores(answers: Mapping[str, int | str | None]) -> ScoreCard:
    """
    Score a complete set of questionnaire answers.

    Args:
        answers: Question id to answer (int or numeric string, 1-5)

    Returns:
        ScoreCard with sub-scores, overall score and threshold copy

    Raises:
        ValidationError: On a missing, non-integer or out-of-range answer
    """
    a = parse_answers(answers)

    market_score = round_half_up(
        (_scale(a[MARKET_POTENTIAL]) + (100 - _scale(a[COMPETITION_INTENSITY]))) / 2
    )
    product_score = round_half_up(
        (_scale(a[PRODUCT_DIFFERENTIATION]) + _scale(a[SCALABILITY_POTENTIAL])) / 2
    )
    financial_score = round_half_up(_scale(a[TEAM_EXPERIENCE]))
    overall_score = overall_from_subscores(market_score, product_score, financial_score)

    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendations: list[str] = []

    for score, (strength, weakness, recommendation) in (
        (market_score, MARKET_COPY),
        (product_score, PRODUCT_COPY),
        (financial_score, TEAM_COPY),
    ):
        if score >= STRENGTH_THRESHOLD:
            strengths.append(strength)
        else:
            weaknesses.append(weakness)
            recommendations.append(recommendation)

    recommendations.extend(GENERAL_RECOMMENDATIONS)

    return ScoreCard(
        market_score=market_score,
        product_score=product_score,
        financial_score=financial_score,
        overall_score=overall_score,
        strengths=strengths,
        weaknesses=weaknesses,
        recommendations=recommendations,
    )
