"""Product API endpoints.

Provides the catalog CRUD endpoints:
- POST /products - create product with images
- GET /products - list products (limit/offset)
- GET /products/{term} - get product by id, slug or title
- PATCH /products/{product_id} - partial update, optional image replacement
- DELETE /products/{product_id} - delete product and its images
"""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from product_catalog.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from product_catalog.catalog.service import PaginationParams, ProductService
from product_catalog.infrastructure.config import settings
from product_catalog.infrastructure.database import get_session_factory

router = APIRouter(prefix="/products", tags=["Products"])

# Columns a PATCH may set back to null
CLEARABLE_FIELDS = {"description", "gender"}


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> ProductService:
    """Get product service with a request-scoped logger."""
    request_id = getattr(request.state, "request_id", None)
    logger = structlog.get_logger("product_catalog.products").bind(request_id=request_id)
    return ProductService(
        session_factory,
        logger=logger,
        default_limit=settings.default_page_size,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create product",
    description="Create a product together with its images.",
)
async def create_product(
    body: ProductCreateRequest,
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductResponse:
    """Create a product.

    Args:
        body: Product fields and image URLs.
        service: Product service.

    Returns:
        Created product.
    """
    product = await service.create(body.model_dump(mode="json"))
    return ProductResponse(**product)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
    description="Get a page of products with their image URLs.",
)
async def list_products(
    service: Annotated[ProductService, Depends(get_service)],
    limit: Annotated[int | None, Query(gt=0, description="Page size")] = None,
    offset: Annotated[int | None, Query(ge=0, description="Items to skip")] = None,
) -> list[ProductResponse]:
    """List products.

    Args:
        service: Product service.
        limit: Page size, defaults to the configured page size.
        offset: Items to skip, defaults to 0.

    Returns:
        Products in creation order.
    """
    products = await service.find_all(PaginationParams(limit=limit, offset=offset))
    return [ProductResponse(**product) for product in products]


@router.get(
    "/{term}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Get a product by id, or by slug or title ignoring case.",
)
async def get_product(
    term: str,
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by id, slug or title.

    Args:
        term: Product id, slug or title.
        service: Product service.

    Returns:
        Product details.
    """
    product = await service.find_one_plain(term)
    return ProductResponse(**product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update product",
    description="Partially update a product. A supplied image list replaces all images.",
)
async def update_product(
    product_id: UUID,
    body: ProductUpdateRequest,
    service: Annotated[ProductService, Depends(get_service)],
) -> ProductResponse:
    """Update a product.

    Args:
        product_id: Product identifier.
        body: Fields to change.
        service: Product service.

    Returns:
        Updated product.
    """
    # null clears nullable columns; for anything else, images included, it means "keep"
    changes = {
        field: value
        for field, value in body.model_dump(mode="json", exclude_unset=True).items()
        if value is not None or field in CLEARABLE_FIELDS
    }
    images = changes.pop("images", None)

    product = await service.update(product_id, changes, images)
    return ProductResponse(**product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
    description="Delete a product and its images.",
)
async def delete_product(
    product_id: UUID,
    service: Annotated[ProductService, Depends(get_service)],
) -> Response:
    """Delete a product.

    Args:
        product_id: Product identifier.
        service: Product service.

    Returns:
        Empty response.
    """
    await service.remove(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
