"""Service factories used by API routers.

This module is the single place routers import per-request service
constructors from.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.db import get_db_session
from trendiwear_api.settings import Settings, get_settings


def get_request_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
SettingsDep = Annotated[Settings, Depends(get_request_settings)]


def get_audit_log_service(session: SessionDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService

    return AuditLogService(session=session)


def get_users_service(session: SessionDep, settings: SettingsDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService
    from trendiwear_api.features.users.service import UsersService

    return UsersService(session=session, settings=settings, audit=AuditLogService(session=session))


def get_addresses_service(session: SessionDep, settings: SettingsDep):
    from trendiwear_api.features.addresses.service import AddressesService

    return AddressesService(session=session, settings=settings)


def get_cart_service(session: SessionDep, settings: SettingsDep):
    from trendiwear_api.features.cart.service import CartService

    return CartService(session=session, settings=settings)


def get_wishlist_service(session: SessionDep):
    from trendiwear_api.features.wishlist.service import WishlistService

    return WishlistService(session=session)


def get_categories_service(session: SessionDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService
    from trendiwear_api.features.categories.service import CategoriesService

    return CategoriesService(session=session, audit=AuditLogService(session=session))


def get_collections_service(session: SessionDep):
    from trendiwear_api.features.collections.service import CollectionsService

    return CollectionsService(session=session)


def get_products_service(session: SessionDep):
    from trendiwear_api.features.products.service import ProductsService

    return ProductsService(session=session)


def get_showcase_service(session: SessionDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService
    from trendiwear_api.features.products.showcase import ShowcaseService

    return ShowcaseService(session=session, audit=AuditLogService(session=session))


def get_professionals_service(session: SessionDep):
    from trendiwear_api.features.professionals.service import ProfessionalsService

    return ProfessionalsService(session=session)


def get_professional_types_service(session: SessionDep):
    from trendiwear_api.features.professional_types.service import ProfessionalTypesService

    return ProfessionalTypesService(session=session)


def get_service_categories_service(session: SessionDep):
    from trendiwear_api.features.service_categories.service import ServiceCategoriesService

    return ServiceCategoriesService(session=session)


def get_services_service(session: SessionDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService
    from trendiwear_api.features.services.service import ServicesService

    return ServicesService(session=session, audit=AuditLogService(session=session))


def get_bookings_service(session: SessionDep):
    from trendiwear_api.features.bookings.service import BookingsService

    return BookingsService(session=session)


def get_orders_service(session: SessionDep, settings: SettingsDep):
    from trendiwear_api.features.orders.service import OrdersService

    return OrdersService(session=session, settings=settings)


def get_coupons_service(session: SessionDep):
    from trendiwear_api.features.coupons.service import CouponsService

    return CouponsService(session=session)


def get_reviews_service(session: SessionDep):
    from trendiwear_api.features.reviews.service import ReviewsService

    return ReviewsService(session=session)


def get_reported_content_service(session: SessionDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService
    from trendiwear_api.features.reported_content.service import ReportedContentService

    return ReportedContentService(session=session, audit=AuditLogService(session=session))


def get_system_settings_service(session: SessionDep):
    from trendiwear_api.features.audit_logs.service import AuditLogService
    from trendiwear_api.features.system_settings.service import SystemSettingsService

    return SystemSettingsService(session=session, audit=AuditLogService(session=session))


def get_dashboard_service(session: SessionDep):
    from trendiwear_api.features.dashboard.service import DashboardService

    return DashboardService(session=session)


def get_notifications_service(session: SessionDep):
    from trendiwear_api.features.notifications.service import NotificationsService

    return NotificationsService(session=session)


def get_events_service(session: SessionDep):
    from trendiwear_api.features.events.service import EventsService

    return EventsService(session=session)


def get_outfits_service(session: SessionDep):
    from trendiwear_api.features.outfits.service import OutfitsService

    return OutfitsService(session=session)


def get_saved_outfits_service(session: SessionDep):
    from trendiwear_api.features.outfits.saved import SavedOutfitsService

    return SavedOutfitsService(session=session)


def get_measurements_service(session: SessionDep):
    from trendiwear_api.features.measurements.service import MeasurementsService

    return MeasurementsService(session=session)


def get_professional_analytics_service(session: SessionDep):
    from trendiwear_api.features.professional_analytics.service import (
        ProfessionalAnalyticsService,
    )

    return ProfessionalAnalyticsService(session=session)


def get_blogs_service(session: SessionDep):
    from trendiwear_api.features.blogs.service import BlogsService

    return BlogsService(session=session)


def get_uploads_service(request: Request, settings: SettingsDep):
    from trendiwear_api.features.uploads.service import UploadsService
    from trendiwear_api.infra.storage import get_storage_adapter

    return UploadsService(storage=get_storage_adapter(request), settings=settings)


def get_health_service(session: SessionDep, settings: SettingsDep):
    from trendiwear_api.features.health.service import HealthService

    return HealthService(session=session, settings=settings)


__all__ = [
    "SessionDep",
    "SettingsDep",
    "get_addresses_service",
    "get_audit_log_service",
    "get_blogs_service",
    "get_bookings_service",
    "get_cart_service",
    "get_categories_service",
    "get_collections_service",
    "get_coupons_service",
    "get_dashboard_service",
    "get_events_service",
    "get_health_service",
    "get_measurements_service",
    "get_notifications_service",
    "get_orders_service",
    "get_outfits_service",
    "get_products_service",
    "get_professional_analytics_service",
    "get_professional_types_service",
    "get_professionals_service",
    "get_reported_content_service",
    "get_request_settings",
    "get_reviews_service",
    "get_saved_outfits_service",
    "get_service_categories_service",
    "get_services_service",
    "get_showcase_service",
    "get_system_settings_service",
    "get_uploads_service",
    "get_users_service",
    "get_wishlist_service",
]
