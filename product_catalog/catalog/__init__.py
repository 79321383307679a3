"""Product Catalog Service.

Provides product persistence, lookup by id or slug, and the
transactional update that replaces a product's image set.
"""

from product_catalog.catalog.models import Product, ProductImage
from product_catalog.catalog.repository import ProductRepository
from product_catalog.catalog.service import PaginationParams, ProductService, handle_db_exception

__all__ = [
    # Models
    "Product",
    "ProductImage",
    # Repository
    "ProductRepository",
    # Service
    "PaginationParams",
    "ProductService",
    "handle_db_exception",
]
