"""API endpoints for generated documents (business plan PDF, pitch deck)."""

import re

from fastapi import APIRouter, Path
from fastapi.responses import HTMLResponse, Response

from app.core.document_render import render_business_plan_pdf, render_pitch_deck_html
from app.core.errors import AppError, InternalError
from app.core.logging import get_logger
from app.core.project_bundle import load_project_bundle

logger = get_logger(__name__)

router = APIRouter()


def _attachment_name(project_name: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", project_name).strip("-").lower()
    return f"{slug or 'project'}-business-plan.pdf"


@router.get("/business-plan/{project_id}")
async def generate_business_plan(project_id: int = Path(..., description="Project id")) -> Response:
    """
    Render the business plan PDF for a project.

    Returns:
        ``application/pdf`` attachment
    """
    try:
        bundle = load_project_bundle(project_id)
        pdf = render_business_plan_pdf(bundle)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error generating business plan for project {project_id}: {e}")
        raise InternalError("Failed to generate business plan") from e

    filename = _attachment_name(bundle.project.name)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/pitch-deck/{project_id}", response_class=HTMLResponse)
async def generate_pitch_deck(
    project_id: int = Path(..., description="Project id"),
) -> HTMLResponse:
    """Render the pitch deck slides for a project as HTML."""
    try:
        bundle = load_project_bundle(project_id, include_evaluation=False)
        return HTMLResponse(content=render_pitch_deck_html(bundle))

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error generating pitch deck for project {project_id}: {e}")
        raise InternalError("Failed to generate pitch deck") from e
