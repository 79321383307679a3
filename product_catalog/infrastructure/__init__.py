"""Infrastructure layer: configuration and database access."""
