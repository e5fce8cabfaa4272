"""Security: bearer token verification."""

from storefront_admin.infrastructure.security.jwt import verify_token

__all__ = ["verify_token"]
