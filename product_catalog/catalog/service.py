"""Catalog service for product operations.

High-level service that combines repository operations with
business logic for catalog management: term resolution, paginated
listing and the transactional update that replaces a product's
image set.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, NoReturn
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from product_catalog.catalog.models import Product, ProductImage
from product_catalog.catalog.repository import ProductRepository
from product_catalog.domain.exceptions import (
    DuplicateProductError,
    ProductNotFoundError,
    UnexpectedStoreError,
)
from product_catalog.domain.value_objects import ProductIdTerm, parse_product_term
from product_catalog.infrastructure.database import unit_of_work

UNIQUE_VIOLATION = "23505"


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        limit: Maximum number of items.
        offset: Number of items to skip.
    """

    limit: int | None = None
    offset: int | None = None


def _unique_violation_detail(error: IntegrityError) -> str | None:
    """Extract the store's detail message for a duplicate key error.

    Args:
        error: Integrity error raised by SQLAlchemy.

    Returns:
        Detail message if the error is a unique violation, None otherwise.
    """
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNIQUE_VIOLATION:
        # asyncpg keeps its own exception, with the detail, as the cause
        cause = getattr(orig, "__cause__", None)
        return getattr(cause, "detail", None) or getattr(orig, "detail", None) or str(orig)
    if "UNIQUE constraint failed" in str(orig):
        return str(orig)
    return None


def handle_db_exception(error: SQLAlchemyError, logger: Any) -> NoReturn:
    """Classify a store error and raise the matching domain error.

    Args:
        error: Error raised by the persistence layer.
        logger: Logger used to record unexpected errors.

    Raises:
        DuplicateProductError: On a unique key violation.
        UnexpectedStoreError: On anything else.
    """
    if isinstance(error, IntegrityError):
        detail = _unique_violation_detail(error)
        if detail is not None:
            raise DuplicateProductError(detail) from error

    logger.error("Unexpected store error", error=str(error), exc_info=error)
    raise UnexpectedStoreError() from error


class ProductService:
    """Service for catalog operations.

    Every operation opens its own session from the factory, so the
    session and its connection are released when the operation ends.

    Example usage:
        service = ProductService(async_session_factory)

        product = await service.create({"title": "Lamp", "images": ["a.jpg"]})
        same = await service.find_one_plain("LAMP")
        await service.update(UUID(product["id"]), {"stock": 3}, images=[])
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        logger: Any | None = None,
        default_limit: int = 10,
    ) -> None:
        """Initialize service.

        Args:
            session_factory: Factory for per-operation sessions.
            logger: structlog logger; a module logger is used if omitted.
            default_limit: Page size when the caller gives none.
        """
        self.session_factory = session_factory
        self.logger = logger or structlog.get_logger()
        self.default_limit = default_limit

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a product with its images.

        Args:
            data: Product fields, optionally with an ``images`` URL list.
                ``slug`` defaults to the title.

        Returns:
            Plain product record.

        Raises:
            DuplicateProductError: If title or slug is already taken.
            UnexpectedStoreError: On any other store failure.
        """
        fields = dict(data)
        images = fields.pop("images", None) or []
        if not fields.get("slug"):
            fields["slug"] = fields["title"]

        product = Product(
            **fields,
            images=[ProductImage(url=url) for url in images],
        )

        async with self.session_factory() as session:
            try:
                async with unit_of_work(session):
                    await ProductRepository(session).save(product)
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)

        self.logger.info(
            "Product created",
            product_id=str(product.id),
            slug=product.slug,
            image_count=len(images),
        )
        return product.to_dict()

    async def find_all(self, pagination: PaginationParams) -> list[dict[str, Any]]:
        """List a page of products.

        Args:
            pagination: Limit and offset; missing values use defaults.

        Returns:
            Plain product records.
        """
        limit = pagination.limit if pagination.limit is not None else self.default_limit
        offset = pagination.offset if pagination.offset is not None else 0

        async with self.session_factory() as session:
            try:
                products = await ProductRepository(session).find_all(limit=limit, offset=offset)
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)

        return [product.to_dict() for product in products]

    async def find_one(self, term: str) -> Product:
        """Resolve a product by id, slug or title.

        A UUID-shaped term is only ever looked up by id.

        Args:
            term: Product id, slug or title.

        Returns:
            Product with images loaded.

        Raises:
            ProductNotFoundError: If nothing matches.
        """
        parsed = parse_product_term(term)

        async with self.session_factory() as session:
            repository = ProductRepository(session)
            try:
                if isinstance(parsed, ProductIdTerm):
                    product = await repository.get_by_id(parsed.value)
                else:
                    product = await repository.get_by_title_or_slug(parsed.value)
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)

        if product is None:
            raise ProductNotFoundError(term)

        return product

    async def find_one_plain(self, term: str) -> dict[str, Any]:
        """Resolve a product and flatten its images.

        Args:
            term: Product id, slug or title.

        Returns:
            Plain product record.
        """
        product = await self.find_one(term)
        return product.to_dict()

    async def update(
        self,
        product_id: UUID,
        changes: dict[str, Any],
        images: list[str] | None = None,
    ) -> dict[str, Any]:
        """Apply a partial update, replacing the image set if given.

        ``images=None`` leaves the stored images untouched, while an
        empty list removes them all. The field changes and the image
        replacement commit together or not at all.

        Args:
            product_id: Product ID.
            changes: Fields to overwrite.
            images: New image URLs, or None to keep the current set.

        Returns:
            Plain product record re-read after commit.

        Raises:
            ProductNotFoundError: If the product does not exist.
            DuplicateProductError: If the new title or slug is taken.
            UnexpectedStoreError: On any other store failure.
        """
        async with self.session_factory() as session:
            repository = ProductRepository(session)

            try:
                product = await repository.preload(product_id, changes)
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)
            if product is None:
                raise ProductNotFoundError(str(product_id))

            try:
                async with unit_of_work(session):
                    if images is not None:
                        await repository.replace_images(product_id, images)
                    # image-only updates leave no dirty column for onupdate
                    product.updated_at = datetime.now(timezone.utc)
                    await repository.save(product)
            except SQLAlchemyError as e:
                self.logger.warning("Update rolled back", product_id=str(product_id))
                handle_db_exception(e, self.logger)

        if images is not None:
            self.logger.info(
                "Product image set replaced",
                product_id=str(product_id),
                image_count=len(images),
            )
        self.logger.info(
            "Product updated",
            product_id=str(product_id),
            fields=sorted(changes),
        )

        return await self.find_one_plain(str(product_id))

    async def remove(self, product_id: UUID) -> None:
        """Delete a product and its images.

        Args:
            product_id: Product ID.

        Raises:
            ProductNotFoundError: If the product does not exist.
            UnexpectedStoreError: On a store failure.
        """
        async with self.session_factory() as session:
            repository = ProductRepository(session)

            try:
                product = await repository.get_by_id(product_id)
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)
            if product is None:
                raise ProductNotFoundError(str(product_id))

            try:
                async with unit_of_work(session):
                    await repository.delete(product)
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)

        self.logger.info("Product removed", product_id=str(product_id))

    async def delete_all(self) -> int:
        """Delete every product in the catalog.

        Returns:
            Number of deleted products.
        """
        async with self.session_factory() as session:
            try:
                async with unit_of_work(session):
                    deleted = await ProductRepository(session).delete_all()
            except SQLAlchemyError as e:
                handle_db_exception(e, self.logger)

        self.logger.info("Catalog cleared", deleted=deleted)
        return deleted
