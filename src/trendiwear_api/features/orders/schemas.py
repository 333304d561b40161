from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.features.addresses.schemas import AddressOut
from trendiwear_api.features.products.schemas import ProductBrief
from trendiwear_api.features.users.schemas import UserSummary
from trendiwear_api.models import EscrowStatus, OrderStatus


class OrderItemOut(BaseSchema):
    id: UUID
    product_id: UUID
    professional_id: UUID
    quantity: int
    size: str | None = None
    color: str | None = None
    price: float
    notes: str | None = None
    product: ProductBrief


class EscrowOut(BaseSchema):
    id: UUID
    professional_id: UUID
    amount: float
    release_date: datetime
    status: EscrowStatus


class OrderOut(BaseSchema):
    id: UUID
    customer_id: UUID
    address_id: UUID | None = None
    status: OrderStatus
    subtotal: float
    shipping_cost: float
    discount: float
    tax: float
    total_price: float
    delivery_zone: str | None = None
    coupon_code: str | None = None
    tracking_number: str | None = None
    notes: str | None = None
    actual_delivery: datetime | None = None
    customer: UserSummary | None = None
    address: AddressOut | None = None
    items: list[OrderItemOut] = Field(default_factory=list)
    escrows: list[EscrowOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class OrderPage(Page[OrderOut]):
    pass


class OrderItemCreate(BaseSchema):
    product_id: UUID
    quantity: int = Field(ge=1)
    size: str | None = Field(default=None, max_length=40)
    color: str | None = Field(default=None, max_length=40)
    notes: str | None = None


class OrderCreate(BaseSchema):
    address_id: UUID
    items: list[OrderItemCreate] = Field(min_length=1)
    delivery_zone: str | None = Field(default=None, max_length=120)
    coupon_code: str | None = Field(default=None, max_length=60)
    notes: str | None = None


class OrderUpdate(BaseSchema):
    status: OrderStatus | None = None
    tracking_number: str | None = Field(default=None, max_length=120)
    notes: str | None = None


__all__ = [
    "EscrowOut",
    "OrderCreate",
    "OrderItemCreate",
    "OrderItemOut",
    "OrderOut",
    "OrderPage",
    "OrderUpdate",
]
