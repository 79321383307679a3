"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

import re
from dataclasses import dataclass
from typing import Self
from uuid import UUID

# Canonical 8-4-4-4-12 dashed hexadecimal form, any version nibble.
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ValueObject:
    """Base class for value objects."""

    pass


# ============================================================================
# Product Lookup Terms
# ============================================================================


@dataclass(frozen=True)
class ProductIdTerm(ValueObject):
    """Lookup term that is a product identifier."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create ProductIdTerm from string representation.

        Args:
            value: String UUID representation.

        Returns:
            ProductIdTerm instance.
        """
        return cls(value=UUID(value))

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            UUID as string.
        """
        return str(self.value)


@dataclass(frozen=True)
class ProductSlugTerm(ValueObject):
    """Lookup term matched against a product's title or slug.

    The text is lower-cased on construction so matching is
    case-insensitive.
    """

    value: str

    def __post_init__(self) -> None:
        """Normalize the term to lowercase."""
        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


ProductTerm = ProductIdTerm | ProductSlugTerm


def is_uuid(value: str) -> bool:
    """Check whether a string has the canonical UUID shape.

    Args:
        value: String to check.

    Returns:
        True if value is a 36-character dashed hexadecimal token.
    """
    return UUID_PATTERN.match(value) is not None


def parse_product_term(term: str) -> ProductTerm:
    """Classify a lookup term once, before dispatching.

    UUID-shaped input always becomes an id term, even if some
    product's slug has the same shape.

    Args:
        term: Caller-supplied id, slug or title.

    Returns:
        ProductIdTerm or ProductSlugTerm.
    """
    if is_uuid(term):
        return ProductIdTerm.from_string(term)
    return ProductSlugTerm(term)
