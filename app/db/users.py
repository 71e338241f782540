"""Users database operations."""

from typing import Any

from app.core.logging import get_logger
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)


def create_user(username: str, password: str) -> dict[str, Any]:
    """
    Create a user.

    Args:
        username: Unique username
        password: Credential as supplied by the signup flow

    Returns:
        Created user row
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table("users")
            .insert({"username": username, "password": password})
            .execute()
        )
        if not response.data:
            raise ValueError("No data returned from create_user")

        user = response.data[0]
        logger.info(f"Created user {user['id']}")
        return user

    except Exception as e:
        logger.error(f"Failed to create user {username}: {e}")
        raise


def get_user(user_id: int) -> dict[str, Any] | None:
    """Get a user by id, or None."""
    supabase = get_supabase()

    try:
        response = supabase.table("users").select("*").eq("id", user_id).limit(1).execute()
        rows = response.data or []
        return rows[0] if rows else None

    except Exception as e:
        logger.error(f"Failed to get user {user_id}: {e}")
        raise


def get_user_by_username(username: str) -> dict[str, Any] | None:
    """Get a user by username, or None."""
    supabase = get_supabase()

    try:
        response = (
            supabase.table("users")
            .select("*")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None

    except Exception as e:
        logger.error(f"Failed to get user by username: {e}")
        raise
