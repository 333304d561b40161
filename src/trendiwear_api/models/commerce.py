"""Shopping models: cart, wishlist, coupons and orders."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trendiwear_api.db import Base, TimestampMixin, UTCDateTime, UUIDPrimaryKeyMixin, UUIDType
from trendiwear_api.db.enums import string_enum

from .catalog import Product
from .enums import CouponType, EscrowStatus, OrderStatus
from .user import Address, User


class CartItem(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """One cart line; lines are unique per product/size/color."""

    __tablename__ = "cart_items"
    __table_args__ = (UniqueConstraint("user_id", "product_id", "size", "color"),)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    size: Mapped[str] = mapped_column(String(40), nullable=False, default="")
    color: Mapped[str] = mapped_column(String(40), nullable=False, default="")

    product: Mapped[Product] = relationship(lazy="selectin")


class WishlistItem(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "wishlist_items"
    __table_args__ = (UniqueConstraint("user_id", "product_id"),)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )

    product: Mapped[Product] = relationship(lazy="selectin")


class Coupon(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "coupons"

    code: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    type: Mapped[CouponType] = mapped_column(
        string_enum(CouponType, name="coupon_type"), nullable=False
    )
    value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    min_order_amount: Mapped[float | None] = mapped_column(Float)
    max_discount: Mapped[float | None] = mapped_column(Float)
    valid_from: Mapped[datetime | None] = mapped_column(UTCDateTime())
    valid_until: Mapped[datetime | None] = mapped_column(UTCDateTime())
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Order(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "orders"

    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    address_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("addresses.id", ondelete="SET NULL")
    )
    status: Mapped[OrderStatus] = mapped_column(
        string_enum(OrderStatus, name="order_status"),
        nullable=False,
        default=OrderStatus.PENDING,
        index=True,
    )
    subtotal: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    shipping_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    discount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    tax: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    delivery_zone: Mapped[str | None] = mapped_column(String(120))
    coupon_code: Mapped[str | None] = mapped_column(String(60))
    tracking_number: Mapped[str | None] = mapped_column(String(120))
    notes: Mapped[str | None] = mapped_column(Text)
    actual_delivery: Mapped[datetime | None] = mapped_column(UTCDateTime())

    customer: Mapped[User] = relationship(lazy="selectin")
    address: Mapped[Address | None] = relationship(lazy="selectin")
    items: Mapped[list[OrderItem]] = relationship(
        lazy="selectin", cascade="all, delete-orphan", order_by="OrderItem.created_at"
    )
    escrows: Mapped[list[PaymentEscrow]] = relationship(
        lazy="selectin", cascade="all, delete-orphan"
    )


class OrderItem(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "order_items"

    order_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    professional_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    size: Mapped[str | None] = mapped_column(String(40))
    color: Mapped[str | None] = mapped_column(String(40))
    price: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)

    product: Mapped[Product] = relationship(lazy="selectin")


class PaymentEscrow(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Funds held for one professional until ``release_date``."""

    __tablename__ = "payment_escrows"

    order_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    professional_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    release_date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    status: Mapped[EscrowStatus] = mapped_column(
        string_enum(EscrowStatus, name="escrow_status"),
        nullable=False,
        default=EscrowStatus.HELD,
    )


class DeliveryConfirmation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "delivery_confirmations"

    order_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    confirmed_by: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="SET NULL")
    )
    delivered_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)


__all__ = [
    "CartItem",
    "Coupon",
    "DeliveryConfirmation",
    "Order",
    "OrderItem",
    "PaymentEscrow",
    "WishlistItem",
]
