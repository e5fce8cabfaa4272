"""Repository dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.infrastructure.persistence.database import get_db
from storefront_admin.infrastructure.persistence.repositories import (
    DashboardRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
    UserRoleRepository,
)


async def get_product_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductRepository:
    return ProductRepository(db)


async def get_order_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderRepository:
    return OrderRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


async def get_user_role_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRoleRepository:
    return UserRoleRepository(db)


async def get_dashboard_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DashboardRepository:
    """Dashboard counts and revenue (read-only)."""
    return DashboardRepository(db)
