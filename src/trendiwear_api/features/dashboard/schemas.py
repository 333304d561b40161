from __future__ import annotations

from trendiwear_api.common.schema import BaseSchema


class DashboardStats(BaseSchema):
    total_users: int
    total_professionals: int
    total_orders: int
    total_revenue: float
    monthly_growth: float
    pending_orders: int


__all__ = ["DashboardStats"]
