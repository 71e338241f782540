"""API endpoints for market analysis (wizard step 2)."""

from fastapi import APIRouter, Path, status

from app.core.errors import AppError, InternalError, NotFoundError
from app.core.logging import get_logger
from app.core.schemas_market_analysis import (
    CreateMarketAnalysisRequest,
    MarketAnalysisResponse,
    UpdateMarketAnalysisRequest,
)
from app.core.wizard import record_step_quietly
from app.db import satellites
from app.db.projects import get_project

logger = get_logger(__name__)

router = APIRouter()


@router.post("", response_model=MarketAnalysisResponse, status_code=status.HTTP_201_CREATED)
async def create_market_analysis(body: CreateMarketAnalysisRequest) -> MarketAnalysisResponse:
    """
    Store the market analysis for a project, replacing any earlier one.

    Raises:
        NotFoundError: If the project does not exist
    """
    try:
        if not get_project(body.project_id):
            raise NotFoundError("Project not found")

        row = satellites.upsert_for_project(
            satellites.MARKET_ANALYSIS, body.project_id, body.to_row()
        )
        record_step_quietly(body.project_id, "market")
        return MarketAnalysisResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error storing market analysis: {e}")
        raise InternalError("Failed to store market analysis") from e


@router.get("/project/{project_id}", response_model=MarketAnalysisResponse)
async def get_market_analysis(
    project_id: int = Path(..., description="Project id"),
) -> MarketAnalysisResponse:
    try:
        row = satellites.get_for_project(satellites.MARKET_ANALYSIS, project_id)
        if not row:
            raise NotFoundError("Market analysis not found")
        return MarketAnalysisResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error getting market analysis for project {project_id}: {e}")
        raise InternalError("Failed to get market analysis") from e


@router.patch("/{record_id}", response_model=MarketAnalysisResponse)
async def update_market_analysis(
    body: UpdateMarketAnalysisRequest,
    record_id: int = Path(..., description="Market analysis id"),
) -> MarketAnalysisResponse:
    try:
        row = satellites.update_by_id(satellites.MARKET_ANALYSIS, record_id, body.to_row())
        if not row:
            raise NotFoundError("Market analysis not found")
        return MarketAnalysisResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error updating market analysis {record_id}: {e}")
        raise InternalError("Failed to update market analysis") from e
