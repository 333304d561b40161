from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.models import Coupon, CouponType, Order, User

from .schemas import CouponCreate, CouponOut, CouponPage

logger = logging.getLogger(__name__)


class CouponsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_coupons(self, *, params: PageParams, active: bool | None = None) -> CouponPage:
        stmt = select(Coupon)
        if active is not None:
            stmt = stmt.where(Coupon.is_active.is_(active))
        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Coupon.created_at.desc(), Coupon.id],
        )

        usage: dict[str, int] = {}
        codes = [coupon.code for coupon in result.rows]
        if codes:
            rows = await self._session.execute(
                select(Order.coupon_code, func.count())
                .where(Order.coupon_code.in_(codes))
                .group_by(Order.coupon_code)
            )
            usage = {code: count for code, count in rows.all()}

        items = [
            CouponOut.model_validate(coupon).model_copy(
                update={"order_count": usage.get(coupon.code, 0)}
            )
            for coupon in result.rows
        ]
        logger.info(
            "coupons.list.success",
            extra=log_context(count=len(items), total=result.pagination.total),
        )
        return CouponPage(items=items, pagination=result.pagination)

    async def create_coupon(self, *, payload: CouponCreate, actor: User) -> CouponOut:
        code = payload.code.strip().upper()
        existing = await self._session.execute(
            select(Coupon.id).where(func.upper(Coupon.code) == code)
        )
        if existing.first() is not None:
            raise HTTPException(status.HTTP_409_CONFLICT, detail="Coupon code already exists")

        data = payload.model_dump()
        data.update(code=code, type=CouponType(payload.type))
        coupon = Coupon(**data)
        self._session.add(coupon)
        await self._session.flush()

        logger.info(
            "coupons.create.success",
            extra=log_context(coupon_id=str(coupon.id), code=code, user_id=str(actor.id)),
        )
        return CouponOut.model_validate(coupon)


__all__ = ["CouponsService"]
