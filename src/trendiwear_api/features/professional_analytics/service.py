"""Sales analytics for the calling professional's storefront."""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.db import utc_now
from trendiwear_api.models import (
    Order,
    OrderItem,
    OrderStatus,
    ProfessionalProfile,
    Product,
    User,
)

from .metrics import (
    Period,
    SaleLine,
    conversion_rate,
    monthly_revenue,
    peak_hours,
    percent_change,
    period_window,
    previous_window,
    top_products,
)
from .schemas import (
    AnalyticsComparison,
    AnalyticsOverview,
    DashboardMetrics,
    DashboardProfessional,
    DateRange,
    PeakHours,
    PeriodComparison,
    ProductPerformance,
    ProductViews,
    ProfessionalAnalytics,
    ProfessionalDashboard,
    RecentOrder,
)

logger = logging.getLogger(__name__)

DASHBOARD_PERIOD: Period = "30d"
TOP_PRODUCTS = 5
TOP_SERVICES = 3
RECENT_ORDERS = 5


def _live(lines: list[SaleLine]) -> list[SaleLine]:
    return [line for line in lines if line.status != OrderStatus.CANCELLED.value]


def _revenue(lines: list[SaleLine]) -> float:
    return round(sum(line.amount for line in lines), 2)


def _order_count(lines: list[SaleLine]) -> int:
    return len({line.order_id for line in lines})


class ProfessionalAnalyticsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def analytics(
        self,
        *,
        user: User,
        period: Period = "30d",
        compare: bool = False,
        now: datetime | None = None,
    ) -> ProfessionalAnalytics:
        """Revenue, product and timing figures for ``period``; cancelled orders don't count."""

        await self._profile(user)
        start, end = period_window(period, now or utc_now())
        lines = _live(await self._sales(user, start, end))
        products = await self._products(user)

        revenue = _revenue(lines)
        orders = _order_count(lines)
        views = sum(product.view_count for product in products)
        sold = sum(product.sold_count for product in products)

        comparison = None
        if compare:
            prev_start, prev_end = previous_window(start, end)
            previous = _live(await self._sales(user, prev_start, prev_end))
            prev_revenue = _revenue(previous)
            prev_orders = _order_count(previous)
            comparison = AnalyticsComparison(
                previous_period=DateRange(start=prev_start, end=prev_end),
                orders=PeriodComparison(
                    current=orders,
                    previous=prev_orders,
                    change=percent_change(orders, prev_orders),
                ),
                revenue=PeriodComparison(
                    current=revenue,
                    previous=prev_revenue,
                    change=percent_change(revenue, prev_revenue),
                ),
            )

        viewed = sorted(
            (product for product in products if product.view_count > 0),
            key=lambda product: (-product.view_count, product.name),
        )[:TOP_PRODUCTS]
        result = ProfessionalAnalytics(
            period=period,
            date_range=DateRange(start=start, end=end),
            overview=AnalyticsOverview(
                total_products=len(products),
                total_revenue=revenue,
                total_orders=orders,
                conversion_rate=conversion_rate(views, sold),
                avg_order_value=round(revenue / orders, 2) if orders else 0.0,
            ),
            top_products=[
                ProductPerformance(**row) for row in top_products(lines, limit=TOP_PRODUCTS)
            ],
            monthly_revenue=monthly_revenue(lines),
            most_viewed_products=[
                ProductViews(
                    product_id=product.id,
                    name=product.name,
                    views=product.view_count,
                    sold=product.sold_count,
                    conversion_rate=min(
                        conversion_rate(product.view_count, product.sold_count), 100.0
                    ),
                )
                for product in viewed
            ],
            peak_hours=PeakHours(**peak_hours(line.created_at for line in lines)),
            comparison=comparison,
        )
        logger.info(
            "professional_analytics.report.success",
            extra=log_context(
                user_id=str(user.id), period=period, orders=orders, compare=compare
            ),
        )
        return result

    async def dashboard(self, *, user: User, now: datetime | None = None) -> ProfessionalDashboard:
        """The last thirty days at a glance, compared with the thirty before."""

        profile = await self._profile(user)
        start, end = period_window(DASHBOARD_PERIOD, now or utc_now())
        all_lines = await self._sales(user, start, end)
        lines = _live(all_lines)
        prev_start, prev_end = previous_window(start, end)
        previous = _order_count(_live(await self._sales(user, prev_start, prev_end)))
        products = await self._products(user)
        current = _order_count(lines)

        delivered = {
            line.order_id for line in lines if line.status == OrderStatus.DELIVERED.value
        }
        dashboard = ProfessionalDashboard(
            professional=DashboardProfessional(
                business_name=profile.business_name,
                specialization=profile.specialization.name if profile.specialization else None,
            ),
            metrics=DashboardMetrics(
                total_revenue=_revenue(lines),
                completed_orders=len(delivered),
                avg_rating=round(profile.rating, 1),
                total_reviews=profile.total_reviews,
                active_customers=len({line.customer_id for line in lines}),
                total_products=len(products),
                conversion_rate=conversion_rate(
                    sum(product.view_count for product in products),
                    sum(product.sold_count for product in products),
                ),
            ),
            top_services=[
                ProductPerformance(**row) for row in top_products(lines, limit=TOP_SERVICES)
            ],
            recent_orders=self._recent_orders(all_lines),
            period_comparison=PeriodComparison(
                current=current,
                previous=previous,
                change=percent_change(current, previous),
            ),
        )
        logger.info(
            "professional_analytics.dashboard.success",
            extra=log_context(user_id=str(user.id), orders=current, previous=previous),
        )
        return dashboard

    @staticmethod
    def _recent_orders(lines: list[SaleLine]) -> list[RecentOrder]:
        """One entry per order, newest first, summing this professional's lines."""

        by_order: dict[UUID, RecentOrder] = {}
        for line in sorted(lines, key=lambda item: item.created_at, reverse=True):
            entry = by_order.get(line.order_id)
            if entry is None:
                by_order[line.order_id] = RecentOrder(
                    id=line.order_id,
                    product_name=line.product_name,
                    amount=line.amount,
                    status=OrderStatus(line.status),
                    date=line.created_at,
                )
            else:
                entry.amount = round(entry.amount + line.amount, 2)
        return list(by_order.values())[:RECENT_ORDERS]

    async def _profile(self, user: User) -> ProfessionalProfile:
        stmt = select(ProfessionalProfile).where(ProfessionalProfile.user_id == user.id)
        profile = (await self._session.execute(stmt)).scalar_one_or_none()
        if profile is None:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND, detail="Professional profile not found"
            )
        return profile

    async def _products(self, user: User) -> list[Product]:
        stmt = select(Product).where(
            Product.professional_id == user.id, Product.is_active.is_(True)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def _sales(self, user: User, start: datetime, end: datetime) -> list[SaleLine]:
        stmt = (
            select(
                OrderItem.order_id,
                OrderItem.product_id,
                Product.name,
                Order.customer_id,
                OrderItem.quantity,
                OrderItem.price,
                Order.status,
                Order.created_at,
            )
            .join(Order, Order.id == OrderItem.order_id)
            .join(Product, Product.id == OrderItem.product_id)
            .where(
                OrderItem.professional_id == user.id,
                Order.created_at >= start,
                Order.created_at < end,
            )
        )
        rows = (await self._session.execute(stmt)).all()
        return [
            SaleLine(
                order_id=row.order_id,
                product_id=row.product_id,
                product_name=row.name,
                customer_id=row.customer_id,
                quantity=row.quantity,
                amount=row.price * row.quantity,
                status=OrderStatus(row.status).value,
                created_at=row.created_at,
            )
            for row in rows
        ]


__all__ = ["ProfessionalAnalyticsService"]
