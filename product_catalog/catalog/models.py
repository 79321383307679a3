"""SQLAlchemy models for product catalog.

Defines Product and ProductImage tables for persistent storage.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from product_catalog.infrastructure.database import Base


def normalize_slug(value: str) -> str:
    """Normalize a slug for storage and matching.

    Args:
        value: Raw slug or title.

    Returns:
        Lower-cased slug with spaces as underscores and no apostrophes.
    """
    return value.lower().replace(" ", "_").replace("'", "")


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID).
        title: Product title, unique.
        slug: URL-friendly name, unique, always normalized.
        price: Unit price.
        description: Product description.
        stock: Available quantity.
        sizes: Available sizes (e.g. ["S", "M"]).
        gender: Target audience.
        tags: Free-form lowercase tags.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        images: Related image rows.
    """

    __tablename__ = "products"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug})>"

    @validates("slug")
    def _normalize_slug(self, key: str, value: str) -> str:
        return normalize_slug(value)

    @validates("tags")
    def _normalize_tags(self, key: str, value: list[str]) -> list[str]:
        return [tag.lower() for tag in value]

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dictionary with images flattened to URLs.

        Returns:
            Dictionary representation.
        """
        return {
            "id": str(self.id),
            "title": self.title,
            "slug": self.slug,
            "price": self.price,
            "description": self.description,
            "stock": self.stock,
            "sizes": list(self.sizes),
            "gender": self.gender,
            "tags": list(self.tags),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "images": [image.url for image in self.images],
        }


class ProductImage(Base):
    """Image attached to a product.

    Attributes:
        id: Unique image identifier.
        url: Image URL.
        product_id: Owning product ID.
    """

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    product_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductImage(id={self.id}, url={self.url})>"
