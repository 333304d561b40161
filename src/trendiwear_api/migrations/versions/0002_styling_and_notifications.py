"""Events, outfit inspirations, measurements and notifications."""

from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from alembic import op

from trendiwear_api.db.types import UTCDateTime, UUIDType

# Revision identifiers, used by Alembic.
revision = "0002_styling_and_notifications"
down_revision: Optional[str] = "0001_initial_schema"
branch_labels: Optional[str] = None
depends_on: Optional[str] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "events",
        sa.Column("id", UUIDType(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=1024), nullable=True),
        sa.Column("dress_codes", sa.JSON(), nullable=False),
        sa.Column("seasonality", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "outfit_inspirations",
        sa.Column("id", UUIDType(), primary_key=True),
        sa.Column(
            "event_id",
            UUIDType(),
            sa.ForeignKey("events.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column(
            "stylist_id",
            UUIDType(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("outfit_image_url", sa.String(length=1024), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        op.f("outfit_inspirations_event_id_idx"), "outfit_inspirations", ["event_id"]
    )
    op.create_index(
        op.f("outfit_inspirations_stylist_id_idx"), "outfit_inspirations", ["stylist_id"]
    )

    op.create_table(
        "outfit_products",
        sa.Column("id", UUIDType(), primary_key=True),
        sa.Column(
            "outfit_id",
            UUIDType(),
            sa.ForeignKey("outfit_inspirations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "product_id",
            UUIDType(),
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("outfit_id", "product_id"),
    )
    op.create_index(op.f("outfit_products_outfit_id_idx"), "outfit_products", ["outfit_id"])
    op.create_index(op.f("outfit_products_product_id_idx"), "outfit_products", ["product_id"])

    op.create_table(
        "saved_outfits",
        sa.Column("id", UUIDType(), primary_key=True),
        sa.Column(
            "user_id",
            UUIDType(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "outfit_id",
            UUIDType(),
            sa.ForeignKey("outfit_inspirations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "outfit_id"),
    )
    op.create_index(op.f("saved_outfits_user_id_idx"), "saved_outfits", ["user_id"])
    op.create_index(op.f("saved_outfits_outfit_id_idx"), "saved_outfits", ["outfit_id"])

    op.create_table(
        "measurements",
        sa.Column("id", UUIDType(), primary_key=True),
        sa.Column(
            "user_id",
            UUIDType(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("bust", sa.Float(), nullable=True),
        sa.Column("waist", sa.Float(), nullable=True),
        sa.Column("hips", sa.Float(), nullable=True),
        sa.Column("shoulder", sa.Float(), nullable=True),
        sa.Column("arm_length", sa.Float(), nullable=True),
        sa.Column("inseam", sa.Float(), nullable=True),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("top_size", sa.String(length=20), nullable=True),
        sa.Column("bottom_size", sa.String(length=20), nullable=True),
        sa.Column("dress_size", sa.String(length=20), nullable=True),
        sa.Column("shoe_size", sa.String(length=20), nullable=True),
        sa.Column(
            "body_type",
            sa.Enum(
                "HOURGLASS",
                "PEAR",
                "APPLE",
                "RECTANGLE",
                "INVERTED_TRIANGLE",
                name="body_type",
                native_enum=False,
                create_constraint=True,
                length=30,
            ),
            nullable=True,
        ),
        sa.Column("style_preferences", sa.JSON(), nullable=False),
        sa.Column("preferred_colors", sa.JSON(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "notifications",
        sa.Column("id", UUIDType(), primary_key=True),
        sa.Column(
            "user_id",
            UUIDType(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.Enum(
                "ORDER_UPDATE",
                "BOOKING_UPDATE",
                "REVIEW",
                "PROMOTION",
                "SYSTEM",
                name="notification_type",
                native_enum=False,
                create_constraint=True,
                length=20,
            ),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("data", sa.JSON(), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "notifications_user_id_is_read_idx", "notifications", ["user_id", "is_read"]
    )


def downgrade() -> None:
    op.drop_index("notifications_user_id_is_read_idx", table_name="notifications")
    op.drop_table("notifications")
    op.drop_table("measurements")
    op.drop_index(op.f("saved_outfits_outfit_id_idx"), table_name="saved_outfits")
    op.drop_index(op.f("saved_outfits_user_id_idx"), table_name="saved_outfits")
    op.drop_table("saved_outfits")
    op.drop_index(op.f("outfit_products_product_id_idx"), table_name="outfit_products")
    op.drop_index(op.f("outfit_products_outfit_id_idx"), table_name="outfit_products")
    op.drop_table("outfit_products")
    op.drop_index(
        op.f("outfit_inspirations_stylist_id_idx"), table_name="outfit_inspirations"
    )
    op.drop_index(op.f("outfit_inspirations_event_id_idx"), table_name="outfit_inspirations")
    op.drop_table("outfit_inspirations")
    op.drop_table("events")
