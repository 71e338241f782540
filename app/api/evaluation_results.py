"""API endpoints for evaluation results (final wizard step)."""

import logging

from fastapi import APIRouter, Path, status

from app.core.errors import AppError, InternalError, NotFoundError
from app.core.logging import get_logger, log_with_context
from app.core.schemas_evaluation import (
    CreateEvaluationResultsRequest,
    EvaluationResultsResponse,
    ScoreAnswersRequest,
    ScoreCard,
)
from app.core.scoring import compute_scores, overall_from_subscores
from app.core.wizard import record_step_quietly
from app.db import satellites
from app.db.projects import get_project

logger = get_logger(__name__)

router = APIRouter()


def _score_card(body: CreateEvaluationResultsRequest) -> ScoreCard:
    """Score from answers, or accept supplied sub-scores and derive what is missing."""
    if body.answers is not None:
        return compute_scores(body.answer_map())

    overall = body.overall_score
    if overall is None:
        overall = overall_from_subscores(body.market_score, body.product_score, body.financial_score)

    return ScoreCard(
        market_score=body.market_score,
        product_score=body.product_score,
        financial_score=body.financial_score,
        overall_score=overall,
        strengths=body.strengths or [],
        weaknesses=body.weaknesses or [],
        recommendations=body.recommendations or [],
    )


@router.post("", response_model=EvaluationResultsResponse, status_code=status.HTTP_201_CREATED)
async def create_evaluation_results(
    body: CreateEvaluationResultsRequest,
) -> EvaluationResultsResponse:
    """
    Score and store the evaluation results for a project.

    Answers are validated before anything is written; a missing or
    out-of-range answer leaves the store untouched.

    Raises:
        ValidationError: On a missing, non-integer or out-of-range answer
        NotFoundError: If the project does not exist
    """
    try:
        card = _score_card(body)

        if not get_project(body.project_id):
            raise NotFoundError("Project not found")

        row = satellites.upsert_for_project(
            satellites.EVALUATION_RESULTS, body.project_id, card.model_dump()
        )
        record_step_quietly(body.project_id, "results")

        log_with_context(
            logger,
            logging.INFO,
            f"Scored project {body.project_id}",
            project_id=body.project_id,
            overall_score=card.overall_score,
            source="answers" if body.answers is not None else "scores",
        )
        return EvaluationResultsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error storing evaluation results: {e}")
        raise InternalError("Failed to store evaluation results") from e


@router.post("/preview", response_model=ScoreCard)
async def preview_scores(body: ScoreAnswersRequest) -> ScoreCard:
    """Score answers without storing anything."""
    return compute_scores(body.answer_map())


@router.get("/project/{project_id}", response_model=EvaluationResultsResponse)
async def get_evaluation_results(
    project_id: int = Path(..., description="Project id"),
) -> EvaluationResultsResponse:
    try:
        row = satellites.get_for_project(satellites.EVALUATION_RESULTS, project_id)
        if not row:
            raise NotFoundError("Evaluation results not found")
        return EvaluationResultsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error getting evaluation results for project {project_id}: {e}")
        raise InternalError("Failed to get evaluation results") from e
