#!/usr/bin/env python3
"""Seed product catalog script.

Deletes every product and inserts a small set of sample products
with images.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --create-tables
    python scripts/seed_catalog.py --keep-existing
"""

import argparse
import asyncio
from typing import Any

import structlog

from product_catalog.catalog.service import ProductService
from product_catalog.infrastructure.database import Base, async_session_factory, engine

logger = structlog.get_logger()

SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "title": "Men's Chill Crew Neck Sweatshirt",
        "description": "Introducing the Tesla Chill Collection.",
        "price": 75,
        "stock": 7,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["sweatshirt"],
        "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
    },
    {
        "title": "Men's Quilted Shirt Jacket",
        "description": "A lightweight quilted jacket for everyday wear.",
        "price": 200,
        "stock": 5,
        "sizes": ["XS", "S", "M", "XL", "XXL"],
        "gender": "men",
        "tags": ["jacket"],
        "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
    },
    {
        "title": "Women's Cropped Puffer Jacket",
        "description": "A cropped puffer with a relaxed fit.",
        "price": 225,
        "stock": 85,
        "sizes": ["XS", "S", "M"],
        "gender": "women",
        "tags": ["hoodie"],
        "images": ["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
    },
    {
        "title": "Kids Cybertruck Tee",
        "description": "Soft cotton tee with a Cybertruck graphic.",
        "price": 30,
        "stock": 10,
        "sizes": ["XS", "S", "M"],
        "gender": "kid",
        "tags": ["shirt"],
        "images": ["1742694-00-A_1_2000.jpg", "1742694-00-A_2.jpg"],
    },
    {
        "title": "Chill Pullover Hoodie",
        "description": "A premium heavyweight hoodie.",
        "price": 130,
        "stock": 10,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "unisex",
        "tags": ["hoodie"],
        "images": ["1740051-00-A_0_2000.jpg", "1740051-00-A_1.jpg"],
    },
]


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(clear: bool = True) -> dict[str, int]:
    """Seed the catalog with sample products.

    Args:
        clear: Whether to delete existing products first.

    Returns:
        Counts of deleted and created products.
    """
    service = ProductService(async_session_factory, logger=logger)

    deleted = await service.delete_all() if clear else 0
    for data in SEED_PRODUCTS:
        await service.create(data)

    return {"deleted": deleted, "created": len(SEED_PRODUCTS)}


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample products",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables before seeding",
    )
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Don't delete existing products",
    )
    args = parser.parse_args()

    if args.create_tables:
        await create_tables()

    result = await seed(clear=not args.keep_existing)
    logger.info("Catalog seeded", **result)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
