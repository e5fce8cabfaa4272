"""SQLAlchemy mixins for common column patterns (DRY).

Provides UUIDPrimaryKeyMixin and CreatedAtMixin matching the hosted schema
(uuid primary keys, server-side created_at).
"""

from datetime import datetime

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class UUIDPrimaryKeyMixin:
    """Mixin for tables keyed by a uuid generated in the database.

    Ids are exposed as strings to the application layer.
    """

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(
            Uuid(as_uuid=False),
            primary_key=True,
            server_default=func.gen_random_uuid(),
        )


class CreatedAtMixin:
    """Mixin for created_at (server default, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )
