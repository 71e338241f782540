"""API endpoints for product details (wizard step 3)."""

from fastapi import APIRouter, Path, status

from app.core.errors import AppError, InternalError, NotFoundError
from app.core.logging import get_logger
from app.core.schemas_product_details import (
    CreateProductDetailsRequest,
    ProductDetailsResponse,
    UpdateProductDetailsRequest,
)
from app.core.wizard import record_step_quietly
from app.db import satellites
from app.db.projects import get_project

logger = get_logger(__name__)

router = APIRouter()


@router.post("", response_model=ProductDetailsResponse, status_code=status.HTTP_201_CREATED)
async def create_product_details(body: CreateProductDetailsRequest) -> ProductDetailsResponse:
    """Store the product details for a project, replacing any earlier ones."""
    try:
        if not get_project(body.project_id):
            raise NotFoundError("Project not found")

        row = satellites.upsert_for_project(
            satellites.PRODUCT_DETAILS, body.project_id, body.to_row()
        )
        record_step_quietly(body.project_id, "product")
        return ProductDetailsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error storing product details: {e}")
        raise InternalError("Failed to store product details") from e


@router.get("/project/{project_id}", response_model=ProductDetailsResponse)
async def get_product_details(
    project_id: int = Path(..., description="Project id"),
) -> ProductDetailsResponse:
    try:
        row = satellites.get_for_project(satellites.PRODUCT_DETAILS, project_id)
        if not row:
            raise NotFoundError("Product details not found")
        return ProductDetailsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error getting product details for project {project_id}: {e}")
        raise InternalError("Failed to get product details") from e


@router.patch("/{record_id}", response_model=ProductDetailsResponse)
async def update_product_details(
    body: UpdateProductDetailsRequest,
    record_id: int = Path(..., description="Product details id"),
) -> ProductDetailsResponse:
    try:
        row = satellites.update_by_id(satellites.PRODUCT_DETAILS, record_id, body.to_row())
        if not row:
            raise NotFoundError("Product details not found")
        return ProductDetailsResponse.model_validate(row)

    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Error updating product details {record_id}: {e}")
        raise InternalError("Failed to update product details") from e
