"""Product repository for database operations.

Provides CRUD operations for products and their images.
"""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from product_catalog.catalog.models import Product, ProductImage


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products including
    term lookups, pagination and image replacement. The repository
    never commits; transaction boundaries belong to the caller.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(limit=10, offset=0)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(
        self,
        product_id: UUID,
        include_images: bool = True,
    ) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.
            include_images: Whether to eagerly load images.

        Returns:
            Product if found, None otherwise.
        """
        query = select(Product).where(Product.id == product_id)

        if include_images:
            query = query.options(selectinload(Product.images))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_title_or_slug(self, term: str) -> Product | None:
        """Get product whose title or slug equals the term, ignoring case.

        Args:
            term: Lowercase title or slug.

        Returns:
            Product with images if found, None otherwise.
        """
        query = (
            select(Product)
            .where(
                or_(
                    func.lower(Product.title) == term,
                    func.lower(Product.slug) == term,
                )
            )
            .options(selectinload(Product.images))
        )

        result = await self.session.execute(query)
        return result.scalars().first()

    async def preload(self, product_id: UUID, changes: dict[str, Any]) -> Product | None:
        """Load a product and apply changes to it without flushing.

        Args:
            product_id: Product ID.
            changes: Field values to merge onto the stored product.

        Returns:
            Merged product if found, None otherwise.
        """
        product = await self.get_by_id(product_id, include_images=False)
        if product is None:
            return None

        for field, value in changes.items():
            setattr(product, field, value)

        return product

    async def find_all(self, limit: int = 10, offset: int = 0) -> Sequence[Product]:
        """Find a page of products with their images.

        Args:
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of products in creation order.
        """
        query = (
            select(Product)
            .order_by(Product.created_at.asc(), Product.id.asc())
            .limit(limit)
            .offset(offset)
            .options(selectinload(Product.images))
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count_images(self, product_id: UUID) -> int:
        """Count image rows owned by a product.

        Args:
            product_id: Product ID.

        Returns:
            Number of image rows.
        """
        query = select(func.count(ProductImage.id)).where(ProductImage.product_id == product_id)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def replace_images(self, product_id: UUID, urls: list[str]) -> list[ProductImage]:
        """Delete every image of a product and stage a new set.

        The new rows are added to the session but not flushed.

        Args:
            product_id: Owning product ID.
            urls: Image URLs for the new set.

        Returns:
            Staged image rows.
        """
        await self.session.execute(
            delete(ProductImage)
            .where(ProductImage.product_id == product_id)
            .execution_options(synchronize_session=False)
        )

        images = [ProductImage(product_id=product_id, url=url) for url in urls]
        self.session.add_all(images)
        return images

    async def delete(self, product: Product) -> None:
        """Delete a product together with its images.

        Args:
            product: Product to delete.
        """
        await self.session.delete(product)
        await self.session.flush()

    async def delete_all(self) -> int:
        """Delete all products and images.

        Returns:
            Number of deleted products.
        """
        await self.session.execute(delete(ProductImage))
        result = await self.session.execute(delete(Product))
        return result.rowcount
