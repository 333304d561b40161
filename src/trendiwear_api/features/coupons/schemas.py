from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from trendiwear_api.common.pagination import Page
from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.models import CouponType


class CouponOut(BaseSchema):
    id: UUID
    code: str
    type: CouponType
    value: float
    min_order_amount: float | None = None
    max_discount: float | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool
    order_count: int = 0
    created_at: datetime
    updated_at: datetime


class CouponPage(Page[CouponOut]):
    pass


class CouponCreate(BaseSchema):
    code: str = Field(min_length=2, max_length=60)
    type: CouponType
    value: float = Field(ge=0)
    min_order_amount: float | None = Field(default=None, ge=0)
    max_discount: float | None = Field(default=None, ge=0)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def _check_window(self) -> CouponCreate:
        if self.valid_from and self.valid_until and self.valid_until < self.valid_from:
            raise ValueError("validUntil must not precede validFrom")
        if self.type == CouponType.PERCENTAGE and self.value > 100:
            raise ValueError("Percentage coupons cannot exceed 100")
        return self


__all__ = ["CouponCreate", "CouponOut", "CouponPage"]
