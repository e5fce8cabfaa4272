"""Product ORM model (catalog item)."""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from storefront_admin.infrastructure.persistence.database import Base
from storefront_admin.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)


class Product(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """Product model. Table: products. slug is unique."""

    __tablename__ = "products"

    title: Mapped[str] = mapped_column(String, nullable=False)
    slug: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    brand: Mapped[str | None] = mapped_column(String, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    original_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    stock_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0")
    )
    in_stock: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
