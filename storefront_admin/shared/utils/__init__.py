"""Shared utilities: identifier checks."""

from storefront_admin.shared.utils.identifiers import is_uuid

__all__ = ["is_uuid"]
