"""API endpoints for projects (wizard step 1)."""

from fastapi import APIRouter, Path, Query, Response, status

from app.core.errors import AppError, InternalError, NotFoundError
from app.core.logging import get_logger
from app.core.project_bundle import load_project_bundle
from app.core.schemas_projects import (
    CreateProjectRequest,
    ProjectBundle,
    ProjectResponse,
    UpdateProjectRequest,
)
from app.core.wizard import record_step_quietly
from app.db import projects as projects_db
from app.db.users import get_user

logger = get_logger(__name__)

router = APIRouter()


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(body: CreateProjectRequest) -> ProjectResponse:
    """
    Create a project from the business basics step.

    Args:
        body: Business basics

    Returns:
        Created project

    Raises:
        NotFoundError: If ``userId`` is given and no such user exists
    """
    try:
        if body.user_id is not None and not get_user(body.user_id):
            raise NotFoundError("User not found")

        project = projects_db.create_project(body.to_row())
        record_step_quietly(project["id"], "basics")
        return ProjectResponse.model_validate(project)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error creating project: {e}")
        raise InternalError("Failed to create project") from e


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    user_id: int = Query(..., alias="userId", description="Owning user id"),
) -> list[ProjectResponse]:
    """List a user's projects, oldest first."""
    try:
        rows = projects_db.list_projects_for_user(user_id)
        return [ProjectResponse.model_validate(row) for row in rows]

    except Exception as e:
        logger.exception(f"Error listing projects for user {user_id}: {e}")
        raise InternalError("Failed to list projects") from e


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: int = Path(..., description="Project id")) -> ProjectResponse:
    try:
        project = projects_db.get_project(project_id)
        if not project:
            raise NotFoundError("Project not found")
        return ProjectResponse.model_validate(project)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error getting project {project_id}: {e}")
        raise InternalError("Failed to get project") from e


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    body: UpdateProjectRequest,
    project_id: int = Path(..., description="Project id"),
) -> ProjectResponse:
    """
    Apply a partial update to a project.

    Only fields present in the body are changed.
    """
    try:
        if body.user_id is not None and not get_user(body.user_id):
            raise NotFoundError("User not found")

        project = projects_db.update_project(project_id, body.to_row())
        if not project:
            raise NotFoundError("Project not found")
        return ProjectResponse.model_validate(project)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error updating project {project_id}: {e}")
        raise InternalError("Failed to update project") from e


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int = Path(..., description="Project id")) -> Response:
    """Delete a project together with its satellites and wizard progress."""
    try:
        if not projects_db.get_project(project_id):
            raise NotFoundError("Project not found")

        projects_db.delete_project(project_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error deleting project {project_id}: {e}")
        raise InternalError("Failed to delete project") from e


@router.get("/{project_id}/bundle", response_model=ProjectBundle)
async def get_project_bundle(
    project_id: int = Path(..., description="Project id"),
) -> ProjectBundle:
    """Project plus whichever satellite records exist."""
    try:
        return load_project_bundle(project_id)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error loading bundle for project {project_id}: {e}")
        raise InternalError("Failed to load project") from e
