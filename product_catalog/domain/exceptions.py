"""Domain exceptions.

All catalog-level errors surfaced to callers. Store failures are
classified into these by the catalog service before they leave it.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class ProductNotFoundError(CatalogError):
    """Raised when no product matches an id, slug or title."""

    def __init__(self, term: str) -> None:
        """Initialize product not found error.

        Args:
            term: The id, slug or title that was looked up.
        """
        super().__init__(
            f"Product with {term} not found",
            details={"term": term},
        )


class DuplicateProductError(CatalogError):
    """Raised when the store reports a unique key violation.

    The store's own detail (e.g. ``Key (title)=(Lamp) already exists.``)
    is passed through to the caller.
    """

    def __init__(self, detail: str) -> None:
        """Initialize duplicate product error.

        Args:
            detail: Detail message reported by the store.
        """
        super().__init__(detail, details={"detail": detail})


class UnexpectedStoreError(CatalogError):
    """Raised for any other store failure.

    The underlying error is logged server-side and never exposed.
    """

    def __init__(self) -> None:
        """Initialize unexpected store error."""
        super().__init__("Unexpected error, check server logs")
