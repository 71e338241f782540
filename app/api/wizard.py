"""API endpoints for evaluation wizard progress."""

from fastapi import APIRouter, Path, Response, status

from app.core.errors import AppError, InternalError, NotFoundError
from app.core.logging import get_logger
from app.core.schemas_wizard import WizardProgressResponse
from app.core.wizard import describe, load_progress, record_step, validate_step
from app.db.projects import get_project
from app.db.wizard_progress import delete_wizard_progress

logger = get_logger(__name__)

router = APIRouter()


def _require_project(project_id: int) -> None:
    if not get_project(project_id):
        raise NotFoundError("Project not found")


@router.get("/{project_id}", response_model=WizardProgressResponse)
async def get_wizard_progress(
    project_id: int = Path(..., description="Project id"),
) -> WizardProgressResponse:
    """Current wizard progress; a project with none stored starts at ``basics``."""
    try:
        _require_project(project_id)
        return describe(load_progress(project_id))

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error getting wizard progress for project {project_id}: {e}")
        raise InternalError("Failed to get wizard progress") from e


@router.post("/{project_id}/steps/{step}", response_model=WizardProgressResponse)
async def complete_wizard_step(
    project_id: int = Path(..., description="Project id"),
    step: str = Path(..., description="Wizard step name"),
) -> WizardProgressResponse:
    """
    Mark a step complete and advance the wizard.

    Raises:
        UnknownStepError: If ``step`` is not a wizard step (400)
        NotFoundError: If the project does not exist
    """
    try:
        validate_step(step)
        _require_project(project_id)
        return describe(record_step(project_id, step))

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error recording wizard step {step} for project {project_id}: {e}")
        raise InternalError("Failed to record wizard step") from e


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def reset_wizard_progress(project_id: int = Path(..., description="Project id")) -> Response:
    """Forget stored progress so the wizard starts over at ``basics``."""
    try:
        _require_project(project_id)
        delete_wizard_progress(project_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error resetting wizard progress for project {project_id}: {e}")
        raise InternalError("Failed to reset wizard progress") from e
