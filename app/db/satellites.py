"""CRUD operations for the per-project satellite tables.

Market analysis, product details, financial projections and evaluation
results all hang off a project with at most one row each, keyed by a unique
``project_id``. They share the same access patterns, so one set of functions
serves all four tables.
"""

from dataclasses import dataclass
from typing import Any

from app.core.logging import get_logger
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)


@dataclass(frozen=True)
class SatelliteKind:
    """One satellite table and the columns callers may write."""

    table: str
    label: str
    fields: frozenset[str]


MARKET_ANALYSIS = SatelliteKind(
    table="market_analysis",
    label="Market analysis",
    fields=frozenset(
        {"target_customers", "market_size", "growth_rate", "competitors", "competitive_advantage"}
    ),
)

PRODUCT_DETAILS = SatelliteKind(
    table="product_details",
    label="Product details",
    fields=frozenset(
        {
            "product_description",
            "unique_value",
            "development_stage",
            "intellectual_property",
            "scalability",
        }
    ),
)

FINANCIAL_PROJECTIONS = SatelliteKind(
    table="financial_projections",
    label="Financial projections",
    fields=frozenset(
        {
            "business_model",
            "revenue_streams",
            "initial_investment",
            "operating_costs",
            "break_even_point",
            "projected_revenue",
        }
    ),
)

EVALUATION_RESULTS = SatelliteKind(
    table="evaluation_results",
    label="Evaluation results",
    fields=frozenset(
        {
            "market_score",
            "product_score",
            "financial_score",
            "overall_score",
            "strengths",
            "weaknesses",
            "recommendations",
        }
    ),
)

ALL_KINDS = (MARKET_ANALYSIS, PRODUCT_DETAILS, FINANCIAL_PROJECTIONS, EVALUATION_RESULTS)


def _filter(kind: SatelliteKind, data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k in kind.fields and v is not None}


def upsert_for_project(kind: SatelliteKind, project_id: int, data: dict[str, Any]) -> dict[str, Any]:
    """
    Create the satellite row for a project, replacing any existing one.

    Args:
        kind: Satellite table
        project_id: Owning project id
        data: snake_case column values

    Returns:
        Stored row as dict

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    try:
        row = {"project_id": project_id, **_filter(kind, data)}
        response = (
            supabase.table(kind.table)
            .upsert(row, on_conflict="project_id")
            .execute()
        )

        if not response.data:
            raise ValueError(f"No data returned from {kind.table} upsert")

        stored = response.data[0]
        logger.info(
            f"Stored {kind.label.lower()} {stored['id']} for project {project_id}",
            extra={"project_id": project_id},
        )
        return stored

    except Exception as e:
        logger.error(f"Failed to store {kind.label.lower()} for project {project_id}: {e}")
        raise


def get_for_project(kind: SatelliteKind, project_id: int) -> dict[str, Any] | None:
    """
    Get the satellite row for a project.

    Returns:
        Row as dict, or None if the project has none yet
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table(kind.table)
            .select("*")
            .eq("project_id", project_id)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None

    except Exception as e:
        logger.error(f"Failed to get {kind.label.lower()} for project {project_id}: {e}")
        raise


def get_by_id(kind: SatelliteKind, record_id: int) -> dict[str, Any] | None:
    """Get a satellite row by its own id."""
    supabase = get_supabase()

    try:
        response = (
            supabase.table(kind.table)
            .select("*")
            .eq("id", record_id)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        return rows[0] if rows else None

    except Exception as e:
        logger.error(f"Failed to get {kind.label.lower()} {record_id}: {e}")
        raise


def update_by_id(kind: SatelliteKind, record_id: int, updates: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a partial update to a satellite row.

    Args:
        kind: Satellite table
        record_id: Row id
        updates: Columns to change; unknown columns and None values are ignored

    Returns:
        Updated row, or None if no row has that id
    """
    supabase = get_supabase()

    try:
        filtered_updates = _filter(kind, updates)
        if not filtered_updates:
            logger.warning(f"No valid updates provided for {kind.table} {record_id}")
            return get_by_id(kind, record_id)

        response = (
            supabase.table(kind.table)
            .update(filtered_updates)
            .eq("id", record_id)
            .execute()
        )

        if not response.data:
            return None

        logger.info(
            f"Updated {kind.label.lower()} {record_id}",
            extra={"updates": list(filtered_updates.keys())},
        )
        return response.data[0]

    except Exception as e:
        logger.error(f"Failed to update {kind.label.lower()} {record_id}: {e}")
        raise


def delete_for_project(kind: SatelliteKind, project_id: int) -> bool:
    """
    Delete the satellite row for a project.

    Returns:
        True if a row was deleted
    """
    supabase = get_supabase()

    try:
        response = supabase.table(kind.table).delete().eq("project_id", project_id).execute()
        return bool(response.data)

    except Exception as e:
        logger.error(f"Failed to delete {kind.label.lower()} for project {project_id}: {e}")
        raise
