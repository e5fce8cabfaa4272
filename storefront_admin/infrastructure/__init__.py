"""Infrastructure layer: database access and token verification."""
