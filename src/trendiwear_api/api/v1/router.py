"""API router composition for the marketplace application."""

from __future__ import annotations

from fastapi import APIRouter

from trendiwear_api.features.addresses.router import router as addresses_router
from trendiwear_api.features.audit_logs.router import router as audit_logs_router
from trendiwear_api.features.blogs.router import router as blogs_router
from trendiwear_api.features.bookings.router import router as bookings_router
from trendiwear_api.features.cart.router import router as cart_router
from trendiwear_api.features.categories.router import router as categories_router
from trendiwear_api.features.collections.router import router as collections_router
from trendiwear_api.features.coupons.router import router as coupons_router
from trendiwear_api.features.dashboard.router import router as dashboard_router
from trendiwear_api.features.events.router import router as events_router
from trendiwear_api.features.health.router import router as health_router
from trendiwear_api.features.measurements.router import router as measurements_router
from trendiwear_api.features.notifications.router import router as notifications_router
from trendiwear_api.features.orders.router import router as orders_router
from trendiwear_api.features.outfits.router import router as outfits_router
from trendiwear_api.features.outfits.saved_router import router as saved_outfits_router
from trendiwear_api.features.products.router import router as products_router
from trendiwear_api.features.products.showcase_router import router as showcase_router
from trendiwear_api.features.professional_analytics.router import (
    router as professional_analytics_router,
)
from trendiwear_api.features.professional_types.router import router as professional_types_router
from trendiwear_api.features.professionals.router import router as professionals_router
from trendiwear_api.features.reported_content.router import router as reported_content_router
from trendiwear_api.features.reviews.router import router as reviews_router
from trendiwear_api.features.service_categories.router import router as service_categories_router
from trendiwear_api.features.services.router import router as services_router
from trendiwear_api.features.system_settings.router import router as system_settings_router
from trendiwear_api.features.uploads.router import router as uploads_router
from trendiwear_api.features.users.router import router as users_router
from trendiwear_api.features.wishlist.router import router as wishlist_router


def create_api_router() -> APIRouter:
    api_router = APIRouter(prefix="/v1")
    api_router.include_router(health_router)
    api_router.include_router(users_router)
    api_router.include_router(addresses_router)
    api_router.include_router(categories_router)
    api_router.include_router(collections_router)
    api_router.include_router(products_router)
    api_router.include_router(showcase_router)
    api_router.include_router(cart_router)
    api_router.include_router(wishlist_router)
    api_router.include_router(orders_router)
    api_router.include_router(coupons_router)
    api_router.include_router(reviews_router)
    api_router.include_router(professionals_router)
    api_router.include_router(professional_types_router)
    api_router.include_router(service_categories_router)
    api_router.include_router(services_router)
    api_router.include_router(bookings_router)
    api_router.include_router(blogs_router)
    api_router.include_router(events_router)
    api_router.include_router(outfits_router)
    api_router.include_router(saved_outfits_router)
    api_router.include_router(measurements_router)
    api_router.include_router(notifications_router)
    api_router.include_router(uploads_router)
    api_router.include_router(reported_content_router)
    api_router.include_router(system_settings_router)
    api_router.include_router(audit_logs_router)
    api_router.include_router(dashboard_router)
    api_router.include_router(professional_analytics_router)
    return api_router


__all__ = ["create_api_router"]
