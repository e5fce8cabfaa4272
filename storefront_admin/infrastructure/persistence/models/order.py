"""Order ORM model, linked to the ordering user."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from storefront_admin.infrastructure.persistence.database import Base
from storefront_admin.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)


class Order(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """Order model. Table: orders. razorpay_order_id is the gateway reference."""

    __tablename__ = "orders"

    user_id: Mapped[str | None] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    razorpay_order_id: Mapped[str | None] = mapped_column(String, nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'pending'")
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

