"""API endpoints for financial projections (wizard step 4)."""

import logging
from typing import Any

from fastapi import APIRouter, Path, status

from app.core.errors import AppError, InternalError, NotFoundError
from app.core.logging import get_logger, log_with_context
from app.core.schemas_financial import (
    CreateFinancialProjectionsRequest,
    FinancialProjectionsResponse,
    OperatingCosts,
    UpdateFinancialProjectionsRequest,
)
from app.core.wizard import record_step_quietly
from app.db import satellites
from app.db.projects import get_project

logger = get_logger(__name__)

router = APIRouter()


def _warn_if_unbalanced(costs: OperatingCosts | None, **context: Any) -> None:
    # Accepted as-is; the split is advisory
    if costs is not None and not costs.is_balanced():
        log_with_context(
            logger,
            logging.WARNING,
            f"Operating costs sum to {costs.total():g}%, not 100%",
            **context,
        )


@router.post(
    "", response_model=FinancialProjectionsResponse, status_code=status.HTTP_201_CREATED
)
async def create_financial_projections(
    body: CreateFinancialProjectionsRequest,
) -> FinancialProjectionsResponse:
    """
    Store the financial projections for a project, replacing any earlier ones.

    ``projectedRevenue`` may be sent directly, or computed from
    ``revenueYear1`` and ``growthRate``.
    """
    try:
        if not get_project(body.project_id):
            raise NotFoundError("Project not found")

        _warn_if_unbalanced(body.operating_costs, project_id=body.project_id)

        row = satellites.upsert_for_project(
            satellites.FINANCIAL_PROJECTIONS, body.project_id, body.to_row()
        )
        record_step_quietly(body.project_id, "financial")
        return FinancialProjectionsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error storing financial projections: {e}")
        raise InternalError("Failed to store financial projections") from e


@router.get("/project/{project_id}", response_model=FinancialProjectionsResponse)
async def get_financial_projections(
    project_id: int = Path(..., description="Project id"),
) -> FinancialProjectionsResponse:
    try:
        row = satellites.get_for_project(satellites.FINANCIAL_PROJECTIONS, project_id)
        if not row:
            raise NotFoundError("Financial projections not found")
        return FinancialProjectionsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error getting financial projections for project {project_id}: {e}")
        raise InternalError("Failed to get financial projections") from e


@router.patch("/{record_id}", response_model=FinancialProjectionsResponse)
async def update_financial_projections(
    body: UpdateFinancialProjectionsRequest,
    record_id: int = Path(..., description="Financial projections id"),
) -> FinancialProjectionsResponse:
    try:
        _warn_if_unbalanced(body.operating_costs, record_id=record_id)

        row = satellites.update_by_id(satellites.FINANCIAL_PROJECTIONS, record_id, body.to_row())
        if not row:
            raise NotFoundError("Financial projections not found")
        return FinancialProjectionsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error updating financial projections {record_id}: {e}")
        raise InternalError("Failed to update financial projections") from e
