"""User and role repositories: accounts for search, role checks for the admin gate."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.application.dtos.records import AccountRecord
from storefront_admin.infrastructure.persistence.models.user import User, UserRole
from storefront_admin.infrastructure.persistence.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Read-only account access."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def list_for_search(self) -> list[AccountRecord]:
        """Every account, oldest first."""
        stmt = select(User.id, User.email, User.full_name).order_by(
            User.created_at, User.id
        )
        result = await self.db.execute(stmt)
        return [
            AccountRecord(id=row.id, email=row.email, full_name=row.full_name)
            for row in result.all()
        ]


class UserRoleRepository(BaseRepository[UserRole]):
    """Role grants (user_roles)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, UserRole)

    async def has_role(self, user_id: str, role: str) -> bool:
        stmt = (
            select(UserRole.id)
            .where(UserRole.user_id == user_id, UserRole.role == role)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.first() is not None
