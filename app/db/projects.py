"""Projects database operations."""

from typing import Any

from app.core.logging import get_logger
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)

PROJECT_FIELDS = {
    "user_id",
    "name",
    "description",
    "industry",
    "stage",
    "target_markets",
    "team_size",
}


def create_project(data: dict[str, Any]) -> dict[str, Any]:
    """
    Create a new project.

    Args:
        data: snake_case project fields (name, description, industry, stage,
            target_markets, team_size, optional user_id)

    Returns:
        Created project row as dict

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    try:
        row = {k: v for k, v in data.items() if k in PROJECT_FIELDS}
        response = supabase.table("projects").insert(row).execute()

        if not response.data:
            raise ValueError("No data returned from create_project")

        project = response.data[0]
        logger.info(
            f"Created project {project['id']}: {project.get('name')}",
            extra={"project_id": project["id"]},
        )
        return project

    except Exception as e:
        logger.error(f"Failed to create project {data.get('name')}: {e}")
        raise


def get_project(project_id: int) -> dict[str, Any] | None:
    """
    Get a single project by ID.

    Args:
        project_id: Project id

    Returns:
        Project row as dict, or None if it does not exist

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table("projects")
            .select("*")
            .eq("id", project_id)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None

    except Exception as e:
        logger.error(f"Failed to get project {project_id}: {e}")
        raise


def list_projects_for_user(user_id: int) -> list[dict[str, Any]]:
    """
    List a user's projects, oldest first.

    Args:
        user_id: Owning user id

    Returns:
        List of project rows
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table("projects")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at")
            .execute()
        )
        return response.data or []

    except Exception as e:
        logger.error(f"Failed to list projects for user {user_id}: {e}")
        raise


def update_project(project_id: int, updates: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a partial update to a project.

    Args:
        project_id: Project id
        updates: Fields to change; unknown fields and None values are ignored

    Returns:
        Updated project row, or None if the project does not exist

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    try:
        filtered_updates = {
            k: v for k, v in updates.items() if k in PROJECT_FIELDS and v is not None
        }

        if not filtered_updates:
            logger.warning(f"No valid updates provided for project {project_id}")
            return get_project(project_id)

        response = (
            supabase.table("projects")
            .update(filtered_updates)
            .eq("id", project_id)
            .execute()
        )

        if not response.data:
            return None

        logger.info(
            f"Updated project {project_id}",
            extra={"project_id": project_id, "updates": list(filtered_updates.keys())},
        )
        return response.data[0]

    except Exception as e:
        logger.error(f"Failed to update project {project_id}: {e}")
        raise


def delete_project(project_id: int) -> bool:
    """
    Delete a project and everything hanging off it.

    Satellite records and wizard progress are removed first so the foreign
    keys never reject the project delete.

    Args:
        project_id: Project id

    Returns:
        True if a project row was deleted, False if none existed
    """
    from app.db import satellites, wizard_progress

    supabase = get_supabase()

    try:
        for kind in satellites.ALL_KINDS:
            satellites.delete_for_project(kind, project_id)
        wizard_progress.delete_wizard_progress(project_id)

        response = supabase.table("projects").delete().eq("id", project_id).execute()
        deleted = bool(response.data)

        if deleted:
            logger.info(f"Deleted project {project_id}", extra={"project_id": project_id})
        return deleted

    except Exception as e:
        logger.error(f"Failed to delete project {project_id}: {e}")
        raise
