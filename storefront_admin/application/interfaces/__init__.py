"""Application ports (repository protocols)."""

from storefront_admin.application.interfaces.repositories import (
    IAccountReader,
    ICatalogItemReader,
    IDashboardReader,
    IOrderReader,
    IUserRoleReader,
)

__all__ = [
    "IAccountReader",
    "ICatalogItemReader",
    "IDashboardReader",
    "IOrderReader",
    "IUserRoleReader",
]
