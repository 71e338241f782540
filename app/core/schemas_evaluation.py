"""Pydantic schemas for evaluation results and questionnaire answers."""

from typing import Annotated

from pydantic import Field, model_validator

from app.core.schemas_common import CamelModel

Score = Annotated[int, Field(ge=0, le=100)]


class QuestionAnswer(CamelModel):
    """One answer from the self-assessment step. The wizard posts strings."""

    question_id: str = Field(..., min_length=1, description="Question identifier")
    answer: int | str = Field(..., description="Answer on the 1-5 scale")


class ScoreAnswersRequest(CamelModel):
    """Answers to score without persisting anything."""

    answers: list[QuestionAnswer] = Field(..., description="Self-assessment answers")

    def answer_map(self) -> dict[str, int | str]:
        return {a.question_id: a.answer for a in self.answers}


class CreateEvaluationResultsRequest(CamelModel):
    """
    Request body for the final wizard step.

    Either ``answers`` (scored server-side) or the three pre-computed
    sub-scores must be supplied. ``overall_score`` is derived when absent.
    """

    project_id: int = Field(..., description="Owning project id")
    answers: list[QuestionAnswer] | None = Field(None, description="Self-assessment answers")

    market_score: Score | None = None
    product_score: Score | None = None
    financial_score: Score | None = None
    overall_score: Score | None = None
    strengths: list[str] | None = None
    weaknesses: list[str] | None = None
    recommendations: list[str] | None = None

    @model_validator(mode="after")
    def require_answers_or_scores(self):
        if self.answers is not None:
            return self
        missing = [
            name
            for name, value in (
                ("marketScore", self.market_score),
                ("productScore", self.product_score),
                ("financialScore", self.financial_score),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"Provide answers or all sub-scores; missing {', '.join(missing)}")
        return self

    def answer_map(self) -> dict[str, int | str]:
        return {a.question_id: a.answer for a in self.answers or []}


class ScoreCard(CamelModel):
    """Output of the scoring engine."""

    market_score: Score
    product_score: Score
    financial_score: Score
    overall_score: Score
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class EvaluationResultsResponse(CamelModel):
    """A stored evaluation results record."""

    id: int
    project_id: int
    market_score: int
    product_score: int
    financial_score: int
    overall_score: int
    strengths: list[str]
    weaknesses: list[str]
    recommendations: list[str]
