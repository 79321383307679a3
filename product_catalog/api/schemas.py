"""API schemas for the product catalog.

Pydantic models for request/response validation and serialization.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class Gender(str, Enum):
    """Target audience of a product."""

    MEN = "men"
    WOMEN = "women"
    KID = "kid"
    UNISEX = "unisex"


class ProductCreateRequest(BaseModel):
    """Request to create a product."""

    title: str = Field(..., min_length=1, max_length=500, description="Unique product title")
    slug: str | None = Field(
        default=None,
        min_length=1,
        max_length=500,
        description="Unique slug; derived from the title when omitted",
    )
    price: float = Field(default=0, ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    stock: int = Field(default=0, ge=0, description="Available quantity")
    sizes: list[str] = Field(default_factory=list, description="Available sizes")
    gender: Gender | None = Field(default=None, description="Target audience")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    images: list[str] = Field(default_factory=list, description="Image URLs")


class ProductUpdateRequest(BaseModel):
    """Request to partially update a product.

    Omitting ``images`` keeps the current images; sending an empty
    list removes them all.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    slug: str | None = Field(default=None, min_length=1, max_length=500)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    stock: int | None = Field(default=None, ge=0)
    sizes: list[str] | None = None
    gender: Gender | None = None
    tags: list[str] | None = None
    images: list[str] | None = Field(default=None, description="Replacement image URLs")


class ProductResponse(BaseModel):
    """Product with images flattened to URLs."""

    id: str = Field(..., description="Unique product identifier")
    title: str = Field(..., description="Product title")
    slug: str = Field(..., description="Normalized slug")
    price: float = Field(..., description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    stock: int = Field(..., description="Available quantity")
    sizes: list[str] = Field(default_factory=list, description="Available sizes")
    gender: str | None = Field(default=None, description="Target audience")
    tags: list[str] = Field(default_factory=list, description="Tags")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    created_at: datetime = Field(..., description="When the product was created")
    updated_at: datetime = Field(..., description="When the product was last updated")
