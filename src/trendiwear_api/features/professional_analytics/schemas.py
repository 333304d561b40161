from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.models import OrderStatus


class DateRange(BaseSchema):
    start: datetime
    end: datetime


class ProductPerformance(BaseSchema):
    product_id: UUID
    name: str
    revenue: float
    orders: int


class ProductViews(BaseSchema):
    product_id: UUID
    name: str
    views: int
    sold: int
    conversion_rate: float


class PeakHours(BaseSchema):
    morning: int = 0
    afternoon: int = 0
    evening: int = 0
    night: int = 0


class PeriodComparison(BaseSchema):
    current: float
    previous: float
    change: float


class AnalyticsComparison(BaseSchema):
    previous_period: DateRange
    orders: PeriodComparison
    revenue: PeriodComparison


class AnalyticsOverview(BaseSchema):
    total_products: int
    total_revenue: float
    total_orders: int
    conversion_rate: float
    avg_order_value: float


class ProfessionalAnalytics(BaseSchema):
    period: str
    date_range: DateRange
    overview: AnalyticsOverview
    top_products: list[ProductPerformance] = Field(default_factory=list)
    monthly_revenue: dict[str, float] = Field(default_factory=dict)
    most_viewed_products: list[ProductViews] = Field(default_factory=list)
    peak_hours: PeakHours
    comparison: AnalyticsComparison | None = None


class DashboardProfessional(BaseSchema):
    business_name: str | None = None
    specialization: str | None = None


class DashboardMetrics(BaseSchema):
    total_revenue: float
    completed_orders: int
    avg_rating: float
    total_reviews: int
    active_customers: int
    total_products: int
    conversion_rate: float


class RecentOrder(BaseSchema):
    id: UUID
    product_name: str
    amount: float
    status: OrderStatus
    date: datetime


class ProfessionalDashboard(BaseSchema):
    professional: DashboardProfessional
    metrics: DashboardMetrics
    top_services: list[ProductPerformance] = Field(default_factory=list)
    recent_orders: list[RecentOrder] = Field(default_factory=list)
    period_comparison: PeriodComparison


__all__ = [
    "AnalyticsComparison",
    "AnalyticsOverview",
    "DashboardMetrics",
    "DashboardProfessional",
    "DateRange",
    "PeakHours",
    "PeriodComparison",
    "ProductPerformance",
    "ProductViews",
    "ProfessionalAnalytics",
    "ProfessionalDashboard",
    "RecentOrder",
]
