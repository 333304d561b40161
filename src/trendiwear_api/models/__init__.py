"""ORM models; importing this package registers every table on ``Base.metadata``."""

from .catalog import Category, Collection, Product
from .commerce import (
    CartItem,
    Coupon,
    DeliveryConfirmation,
    Order,
    OrderItem,
    PaymentEscrow,
    WishlistItem,
)
from .content import Blog, ReportedContent, Review
from .enums import (
    ADMIN_ROLES,
    AddressType,
    BodyType,
    BookingStatus,
    CouponType,
    EscrowStatus,
    Gender,
    NotificationType,
    OrderStatus,
    ReportStatus,
    ReviewTargetType,
    Season,
    StylePreference,
    UserRole,
)
from .notification import Notification
from .professional import DeliveryZone, ProfessionalProfile, ProfessionalType, SocialMedia
from .service import Booking, ProfessionalService, Service, ServiceCategory
from .styling import Event, Measurement, OutfitInspiration, OutfitProduct, SavedOutfit
from .system import AuditLog, SystemSetting
from .user import Address, User

__all__ = [
    "ADMIN_ROLES",
    "Address",
    "AddressType",
    "AuditLog",
    "Blog",
    "BodyType",
    "Booking",
    "BookingStatus",
    "CartItem",
    "Category",
    "Collection",
    "Coupon",
    "CouponType",
    "DeliveryConfirmation",
    "DeliveryZone",
    "EscrowStatus",
    "Event",
    "Gender",
    "Measurement",
    "Notification",
    "NotificationType",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OutfitInspiration",
    "OutfitProduct",
    "PaymentEscrow",
    "ProfessionalProfile",
    "ProfessionalService",
    "ProfessionalType",
    "Product",
    "ReportStatus",
    "ReportedContent",
    "Review",
    "ReviewTargetType",
    "SavedOutfit",
    "Season",
    "Service",
    "ServiceCategory",
    "SocialMedia",
    "StylePreference",
    "SystemSetting",
    "User",
    "UserRole",
    "WishlistItem",
]
