"""User and UserRole ORM models (storefront accounts and their roles)."""

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from storefront_admin.infrastructure.persistence.database import Base
from storefront_admin.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)


class User(CreatedAtMixin, Base):
    """Account profile. Table: users. id mirrors the auth service's user id."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True)
    email: Mapped[str] = mapped_column(String, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String, nullable=True)


class UserRole(UUIDPrimaryKeyMixin, Base):
    """Role grant. Table: user_roles. Unique (user_id, role)."""

    __tablename__ = "user_roles"

    user_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String, nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_user_role"),)
