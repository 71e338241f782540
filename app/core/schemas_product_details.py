"""Pydantic schemas for the product details step."""

from pydantic import Field

from app.core.schemas_common import CamelModel


class CreateProductDetailsRequest(CamelModel):
    """Request body for step 3 of the wizard."""

    project_id: int = Field(..., description="Owning project id")
    product_description: str = Field(..., min_length=10, description="What the product does")
    unique_value: str = Field(..., min_length=10, description="Unique value proposition")
    development_stage: str = Field(..., min_length=1, description="Development stage")
    intellectual_property: str = Field(..., min_length=1, description="IP position")
    scalability: str = Field(..., min_length=10, description="How the product scales")


class UpdateProductDetailsRequest(CamelModel):
    """Partial update for a product details record."""

    product_description: str | None = Field(None, min_length=10)
    unique_value: str | None = Field(None, min_length=10)
    development_stage: str | None = Field(None, min_length=1)
    intellectual_property: str | None = Field(None, min_length=1)
    scalability: str | None = Field(None, min_length=10)


class ProductDetailsResponse(CamelModel):
    """A stored product details record."""

    id: int
    project_id: int
    product_description: str
    unique_value: str
    development_stage: str
    intellectual_property: str
    scalability: str
