"""Initial marketplace schema.

Notes:
- UUID primary keys are CHAR(36) on SQLite and native UUID on Postgres.
- Enums use VARCHAR + CHECK constraints (native_enum=False).
- ``addresses`` carries a partial unique index allowing one default per user.
- Constraint names come from the naming convention on ``Base.metadata``.
"""

from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from alembic import op

from trendiwear_api.db.types import UTCDateTime, UUIDType

# Revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision: Optional[str] = None
branch_labels: Optional[str] = None
depends_on: Optional[str] = None


def _id() -> sa.Column:
    return sa.Column("id", UUIDType(), primary_key=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
    ]


def _fk(name: str, target: str, *, ondelete: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, UUIDType(), sa.ForeignKey(target, ondelete=ondelete), nullable=nullable)


def _enum(name: str, *values: str, length: int = 20) -> sa.Enum:
    return sa.Enum(
        *values,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=length,
    )


def _index(table: str, *columns: str, unique: bool = False) -> None:
    op.create_index(op.f(f"{table}_{columns[0]}_idx"), table, list(columns), unique=unique)


def upgrade() -> None:
    # ---- Accounts --------------------------------------------------------
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(length=320), nullable=False, unique=True),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("profile_image", sa.String(length=1024), nullable=True),
        sa.Column(
            "role",
            _enum("user_role", "CUSTOMER", "PROFESSIONAL", "ADMIN", "SUPER_ADMIN"),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "addresses",
        _id(),
        _fk("user_id", "users.id", ondelete="CASCADE"),
        sa.Column("type", _enum("address_type", "HOME", "WORK", "OTHER"), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("street", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("zip_code", sa.String(length=20), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    _index("addresses", "user_id")
    op.create_index(
        "addresses_user_default_key",
        "addresses",
        ["user_id"],
        unique=True,
        sqlite_where=sa.text("is_default = 1"),
        postgresql_where=sa.text("is_default"),
    )

    # ---- Professionals ---------------------------------------------------
    op.create_table(
        "professional_types",
        _id(),
        sa.Column("name", sa.String(length=120), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "professional_profiles",
        _id(),
        sa.Column(
            "user_id",
            UUIDType(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("slug", sa.String(length=160), nullable=False, unique=True),
        sa.Column("business_name", sa.String(length=200), nullable=True),
        sa.Column("business_image", sa.String(length=1024), nullable=True),
        _fk("specialization_id", "professional_types.id", ondelete="RESTRICT"),
        sa.Column("experience", sa.Integer(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("portfolio_url", sa.String(length=1024), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("availability", sa.String(length=200), nullable=True),
        sa.Column("free_delivery_threshold", sa.Float(), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("total_reviews", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    _index("professional_profiles", "specialization_id")

    op.create_table(
        "professional_social_media",
        _id(),
        _fk("profile_id", "professional_profiles.id", ondelete="CASCADE"),
        sa.Column("platform", sa.String(length=50), nullable=False),
        sa.Column("url", sa.String(length=1024), nullable=False),
    )
    _index("professional_social_media", "profile_id")

    op.create_table(
        "professional_delivery_zones",
        _id(),
        _fk("profile_id", "professional_profiles.id", ondelete="CASCADE"),
        sa.Column("zone_name", sa.String(length=120), nullable=False),
        sa.Column("delivery_fee", sa.Float(), nullable=False),
        sa.Column("estimated_days", sa.Integer(), nullable=False),
    )
    _index("professional_delivery_zones", "profile_id")

    # ---- Catalog ---------------------------------------------------------
    op.create_table(
        "categories",
        _id(),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("slug", sa.String(length=160), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        _fk("parent_id", "categories.id", ondelete="RESTRICT", nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    _index("categories", "parent_id")

    op.create_table(
        "collections",
        _id(),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("slug", sa.String(length=160), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        _fk("category_id", "categories.id", ondelete="RESTRICT", nullable=True),
        sa.Column(
            "season",
            _enum("season", "SPRING", "SUMMER", "FALL", "WINTER", "ALL_SEASON"),
            nullable=True,
        ),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    _index("collections", "category_id")

    op.create_table(
        "products",
        _id(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        _fk("category_id", "categories.id", ondelete="RESTRICT"),
        _fk("collection_id", "collections.id", ondelete="RESTRICT", nullable=True),
        _fk("professional_id", "users.id", ondelete="CASCADE"),
        sa.Column("sizes", sa.JSON(), nullable=False),
        sa.Column("colors", sa.JSON(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("material", sa.String(length=200), nullable=True),
        sa.Column("care_instructions", sa.Text(), nullable=True),
        sa.Column("estimated_delivery", sa.Integer(), nullable=True),
        sa.Column("is_customizable", sa.Boolean(), nullable=False),
        sa.Column("gender", _enum("gender", "MEN", "WOMEN", "UNISEX", "KIDS"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("is_in_stock", sa.Boolean(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False),
        sa.Column("cart_count", sa.Integer(), nullable=False),
        sa.Column("sold_count", sa.Integer(), nullable=False),
        sa.Column("is_showcase_approved", sa.Boolean(), nullable=False),
        sa.Column("approved_at", UTCDateTime(), nullable=True),
        _fk("approved_by", "users.id", ondelete="SET NULL", nullable=True),
        *_timestamps(),
    )
    _index("products", "category_id")
    _index("products", "collection_id")
    _index("products", "professional_id")

    # ---- Services --------------------------------------------------------
    op.create_table(
        "service_categories",
        _id(),
        sa.Column("name", sa.String(length=120), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "services",
        _id(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        _fk("category_id", "service_categories.id", ondelete="RESTRICT"),
        sa.Column("is_home_service", sa.Boolean(), nullable=False),
        sa.Column("requirements", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    _index("services", "category_id")

    op.create_table(
        "professional_services",
        _id(),
        _fk("professional_id", "users.id", ondelete="CASCADE"),
        _fk("service_id", "services.id", ondelete="CASCADE"),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("professional_id", "service_id"),
    )
    _index("professional_services", "professional_id")
    _index("professional_services", "service_id")

    op.create_table(
        "bookings",
        _id(),
        _fk("customer_id", "users.id", ondelete="CASCADE"),
        _fk("professional_id", "users.id", ondelete="SET NULL", nullable=True),
        _fk("service_id", "services.id", ondelete="RESTRICT"),
        sa.Column("booking_date", UTCDateTime(), nullable=False),
        sa.Column("end_time", UTCDateTime(), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column(
            "status",
            _enum("booking_status", "PENDING", "CONFIRMED", "COMPLETED", "CANCELLED"),
            nullable=False,
        ),
        *_timestamps(),
    )
    _index("bookings", "customer_id")
    _index("bookings", "professional_id")
    _index("bookings", "service_id")

    # ---- Commerce --------------------------------------------------------
    op.create_table(
        "cart_items",
        _id(),
        _fk("user_id", "users.id", ondelete="CASCADE"),
        _fk("product_id", "products.id", ondelete="CASCADE"),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("size", sa.String(length=40), nullable=False),
        sa.Column("color", sa.String(length=40), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "product_id", "size", "color"),
    )
    _index("cart_items", "user_id")
    _index("cart_items", "product_id")

    op.create_table(
        "wishlist_items",
        _id(),
        _fk("user_id", "users.id", ondelete="CASCADE"),
        _fk("product_id", "products.id", ondelete="CASCADE"),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "product_id"),
    )
    _index("wishlist_items", "user_id")
    _index("wishlist_items", "product_id")

    op.create_table(
        "coupons",
        _id(),
        sa.Column("code", sa.String(length=60), nullable=False, unique=True),
        sa.Column(
            "type",
            _enum("coupon_type", "PERCENTAGE", "FIXED_AMOUNT", "FREE_SHIPPING"),
            nullable=False,
        ),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("min_order_amount", sa.Float(), nullable=True),
        sa.Column("max_discount", sa.Float(), nullable=True),
        sa.Column("valid_from", UTCDateTime(), nullable=True),
        sa.Column("valid_until", UTCDateTime(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "orders",
        _id(),
        _fk("customer_id", "users.id", ondelete="RESTRICT"),
        _fk("address_id", "addresses.id", ondelete="SET NULL", nullable=True),
        sa.Column(
            "status",
            _enum(
                "order_status",
                "PENDING",
                "CONFIRMED",
                "PROCESSING",
                "SHIPPED",
                "DELIVERED",
                "CANCELLED",
            ),
            nullable=False,
        ),
        sa.Column("subtotal", sa.Float(), nullable=False),
        sa.Column("shipping_cost", sa.Float(), nullable=False),
        sa.Column("discount", sa.Float(), nullable=False),
        sa.Column("tax", sa.Float(), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=False),
        sa.Column("delivery_zone", sa.String(length=120), nullable=True),
        sa.Column("coupon_code", sa.String(length=60), nullable=True),
        sa.Column("tracking_number", sa.String(length=120), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("actual_delivery", UTCDateTime(), nullable=True),
        *_timestamps(),
    )
    _index("orders", "customer_id")
    _index("orders", "status")

    op.create_table(
        "order_items",
        _id(),
        _fk("order_id", "orders.id", ondelete="CASCADE"),
        _fk("product_id", "products.id", ondelete="RESTRICT"),
        _fk("professional_id", "users.id", ondelete="RESTRICT"),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("size", sa.String(length=40), nullable=True),
        sa.Column("color", sa.String(length=40), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    _index("order_items", "order_id")
    _index("order_items", "product_id")
    _index("order_items", "professional_id")

    op.create_table(
        "payment_escrows",
        _id(),
        _fk("order_id", "orders.id", ondelete="CASCADE"),
        _fk("professional_id", "users.id", ondelete="RESTRICT"),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("release_date", UTCDateTime(), nullable=False),
        sa.Column(
            "status",
            _enum("escrow_status", "HELD", "RELEASED", "REFUNDED"),
            nullable=False,
        ),
        *_timestamps(),
    )
    _index("payment_escrows", "order_id")
    _index("payment_escrows", "professional_id")

    op.create_table(
        "delivery_confirmations",
        _id(),
        sa.Column(
            "order_id",
            UUIDType(),
            sa.ForeignKey("orders.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        _fk("confirmed_by", "users.id", ondelete="SET NULL", nullable=True),
        sa.Column("delivered_at", UTCDateTime(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )

    # ---- Content ---------------------------------------------------------
    op.create_table(
        "reviews",
        _id(),
        _fk("user_id", "users.id", ondelete="CASCADE"),
        sa.Column("target_id", UUIDType(), nullable=False),
        sa.Column(
            "target_type",
            _enum("review_target_type", "PRODUCT", "PROFESSIONAL", "SERVICE"),
            nullable=False,
        ),
        _fk("order_id", "orders.id", ondelete="SET NULL", nullable=True),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "target_id", "target_type"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )
    _index("reviews", "user_id")
    _index("reviews", "target_id")

    op.create_table(
        "reported_content",
        _id(),
        _fk("reporter_id", "users.id", ondelete="CASCADE"),
        sa.Column("content_type", sa.String(length=60), nullable=False),
        sa.Column("content_id", sa.String(length=64), nullable=False),
        sa.Column("reason", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("report_status", "PENDING", "REVIEWED", "RESOLVED", "DISMISSED"),
            nullable=False,
        ),
        sa.Column("resolution", sa.Text(), nullable=True),
        _fk("reviewed_by", "users.id", ondelete="SET NULL", nullable=True),
        sa.Column("reviewed_at", UTCDateTime(), nullable=True),
        *_timestamps(),
    )
    _index("reported_content", "reporter_id")
    _index("reported_content", "status")

    op.create_table(
        "blogs",
        _id(),
        _fk("author_id", "users.id", ondelete="CASCADE"),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=280), nullable=False, unique=True),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("cover_image", sa.String(length=1024), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("published_at", UTCDateTime(), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    _index("blogs", "author_id")

    # ---- System ----------------------------------------------------------
    op.create_table(
        "system_settings",
        sa.Column("key", sa.String(length=100), primary_key=True),
        sa.Column("value", sa.JSON(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=60), nullable=False),
        _fk("updated_by", "users.id", ondelete="SET NULL", nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "audit_logs",
        _id(),
        _fk("user_id", "users.id", ondelete="SET NULL", nullable=True),
        sa.Column("action", sa.String(length=60), nullable=False),
        sa.Column("entity", sa.String(length=60), nullable=False),
        sa.Column("entity_id", sa.String(length=64), nullable=True),
        sa.Column("details", sa.JSON(), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("created_at", UTCDateTime(), nullable=False),
    )
    _index("audit_logs", "user_id")
    _index("audit_logs", "action")
    _index("audit_logs", "entity")


def downgrade() -> None:
    for table in (
        "audit_logs",
        "system_settings",
        "blogs",
        "reported_content",
        "reviews",
        "delivery_confirmations",
        "payment_escrows",
        "order_items",
        "orders",
        "coupons",
        "wishlist_items",
        "cart_items",
        "bookings",
        "professional_services",
        "services",
        "service_categories",
        "products",
        "collections",
        "categories",
        "professional_delivery_zones",
        "professional_social_media",
        "professional_profiles",
        "professional_types",
        "addresses",
        "users",
    ):
        op.drop_table(table)
