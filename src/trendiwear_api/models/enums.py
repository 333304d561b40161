"""Enumerations persisted by the marketplace models."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    PROFESSIONAL = "PROFESSIONAL"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


ADMIN_ROLES: tuple[UserRole, ...] = (UserRole.ADMIN, UserRole.SUPER_ADMIN)


class Gender(str, Enum):
    MEN = "MEN"
    WOMEN = "WOMEN"
    UNISEX = "UNISEX"
    KIDS = "KIDS"


class Season(str, Enum):
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"
    WINTER = "WINTER"
    ALL_SEASON = "ALL_SEASON"


class AddressType(str, Enum):
    HOME = "HOME"
    WORK = "WORK"
    OTHER = "OTHER"


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class EscrowStatus(str, Enum):
    HELD = "HELD"
    RELEASED = "RELEASED"
    REFUNDED = "REFUNDED"


class CouponType(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"
    FREE_SHIPPING = "FREE_SHIPPING"


class ReviewTargetType(str, Enum):
    PRODUCT = "PRODUCT"
    PROFESSIONAL = "PROFESSIONAL"
    SERVICE = "SERVICE"


class ReportStatus(str, Enum):
    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    RESOLVED = "RESOLVED"
    DISMISSED = "DISMISSED"


class BodyType(str, Enum):
    HOURGLASS = "HOURGLASS"
    PEAR = "PEAR"
    APPLE = "APPLE"
    RECTANGLE = "RECTANGLE"
    INVERTED_TRIANGLE = "INVERTED_TRIANGLE"


class StylePreference(str, Enum):
    CASUAL = "CASUAL"
    FORMAL = "FORMAL"
    BOHEMIAN = "BOHEMIAN"
    STREETWEAR = "STREETWEAR"
    MINIMALIST = "MINIMALIST"
    ROMANTIC = "ROMANTIC"
    ATHLETIC = "ATHLETIC"
    VINTAGE = "VINTAGE"
    PROFESSIONAL = "PROFESSIONAL"
    ECLECTIC = "ECLECTIC"


class NotificationType(str, Enum):
    ORDER_UPDATE = "ORDER_UPDATE"
    BOOKING_UPDATE = "BOOKING_UPDATE"
    REVIEW = "REVIEW"
    PROMOTION = "PROMOTION"
    SYSTEM = "SYSTEM"


__all__ = [
    "ADMIN_ROLES",
    "AddressType",
    "BodyType",
    "BookingStatus",
    "CouponType",
    "EscrowStatus",
    "Gender",
    "NotificationType",
    "OrderStatus",
    "ReportStatus",
    "ReviewTargetType",
    "Season",
    "StylePreference",
    "UserRole",
]
