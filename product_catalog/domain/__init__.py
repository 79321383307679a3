"""Domain layer - Value objects and exceptions.

This module exports the framework-free building blocks of the catalog:

- **Value Objects**: Lookup terms parsed once from caller input
  (ProductIdTerm, ProductSlugTerm)
- **Exceptions**: Catalog errors surfaced to callers

Example usage:
    from product_catalog.domain import ProductIdTerm, parse_product_term

    term = parse_product_term("Chair")
    assert not isinstance(term, ProductIdTerm)
    print(term)  # chair
"""

from product_catalog.domain.exceptions import (
    CatalogError,
    DomainError,
    DuplicateProductError,
    ProductNotFoundError,
    UnexpectedStoreError,
)
from product_catalog.domain.value_objects import (
    ProductIdTerm,
    ProductSlugTerm,
    ProductTerm,
    ValueObject,
    is_uuid,
    parse_product_term,
)

__all__ = [
    # Value Objects
    "ValueObject",
    "ProductIdTerm",
    "ProductSlugTerm",
    "ProductTerm",
    "is_uuid",
    "parse_product_term",
    # Exceptions
    "DomainError",
    "CatalogError",
    "ProductNotFoundError",
    "DuplicateProductError",
    "UnexpectedStoreError",
]
