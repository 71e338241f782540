"""Wizard progress persistence, one row per project."""

from datetime import datetime, timezone
from typing import Any

from app.core.logging import get_logger
from app.core.schemas_wizard import WizardProgress
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)


def get_wizard_progress(project_id: int) -> WizardProgress | None:
    """
    Load stored wizard progress for a project.

    Returns:
        WizardProgress, or None if nothing has been stored
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table("wizard_progress")
            .select("*")
            .eq("project_id", project_id)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        return WizardProgress.model_validate(rows[0]) if rows else None

    except Exception as e:
        logger.error(f"Failed to get wizard progress for project {project_id}: {e}")
        raise


def save_wizard_progress(progress: WizardProgress) -> WizardProgress:
    """Create or replace the progress row for ``progress.project_id``."""
    supabase = get_supabase()

    row: dict[str, Any] = {
        "project_id": progress.project_id,
        "current_step": progress.current_step,
        "completed_steps": list(progress.completed_steps),
        "updated_at": datetime.now(timezone.utc).isoformat(),
    }

    try:
        response = (
            supabase.table("wizard_progress")
            .upsert(row, on_conflict="project_id")
            .execute()
        )
        stored = response.data[0] if response.data else row
        logger.debug(
            f"Saved wizard progress for project {progress.project_id}: {progress.current_step}",
            extra={"project_id": progress.project_id},
        )
        return WizardProgress.model_validate(stored)

    except Exception as e:
        logger.error(f"Failed to save wizard progress for project {progress.project_id}: {e}")
        raise


def delete_wizard_progress(project_id: int) -> bool:
    """Delete stored progress. Returns True if a row existed."""
    supabase = get_supabase()

    try:
        response = (
            supabase.table("wizard_progress")
            .delete()
            .eq("project_id", project_id)
            .execute()
        )
        return bool(response.data)

    except Exception as e:
        logger.error(f"Failed to delete wizard progress for project {project_id}: {e}")
        raise
