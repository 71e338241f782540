"""API endpoints for AI-generated recommendations and plan enhancement."""

from fastapi import APIRouter, Path

from app.chains.business_recommendations import (
    enhance_business_plan,
    generate_business_recommendations,
)
from app.core.config import get_settings
from app.core.errors import AppError, InternalError
from app.core.logging import get_logger
from app.core.project_bundle import load_project_bundle
from app.core.schemas_recommendations import BusinessRecommendations, EnhancedPlanResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post("/recommendations/{project_id}", response_model=BusinessRecommendations)
async def create_recommendations(
    project_id: int = Path(..., description="Project id"),
) -> BusinessRecommendations:
    """
    Generate AI recommendations for a project.

    Nothing is stored; callers regenerate on demand.

    Raises:
        NotFoundError: If the project does not exist
        RecommendationGenerationError: If the model call fails (502)
    """
    try:
        bundle = load_project_bundle(project_id, include_evaluation=False)
        return generate_business_recommendations(bundle, get_settings())

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error generating recommendations for project {project_id}: {e}")
        raise InternalError("Failed to generate AI recommendations") from e


@router.post("/enhance-plan/{project_id}", response_model=EnhancedPlanResponse)
async def create_enhanced_plan(
    project_id: int = Path(..., description="Project id"),
) -> EnhancedPlanResponse:
    """Generate an enhanced business plan section for a project."""
    try:
        bundle = load_project_bundle(project_id, include_evaluation=False)
        plan = enhance_business_plan(bundle, get_settings())
        return EnhancedPlanResponse(enhanced_plan=plan)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error enhancing business plan for project {project_id}: {e}")
        raise InternalError("Failed to enhance business plan") from e
