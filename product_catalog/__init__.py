"""Product Catalog API package."""
