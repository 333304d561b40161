"""Reviews, blogs and moderation reports."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trendiwear_api.db import Base, TimestampMixin, UTCDateTime, UUIDPrimaryKeyMixin, UUIDType
from trendiwear_api.db.enums import string_enum

from .enums import ReportStatus, ReviewTargetType
from .user import User


class Review(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Rating left by a user on a product, professional or service."""

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "target_id", "target_type"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    target_id: Mapped[uuid.UUID] = mapped_column(UUIDType(), nullable=False, index=True)
    target_type: Mapped[ReviewTargetType] = mapped_column(
        string_enum(ReviewTargetType, name="review_target_type"), nullable=False
    )
    order_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("orders.id", ondelete="SET NULL")
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str | None] = mapped_column(String(200))
    comment: Mapped[str | None] = mapped_column(Text)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user: Mapped[User] = relationship(lazy="selectin")


class ReportedContent(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "reported_content"

    reporter_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content_type: Mapped[str] = mapped_column(String(60), nullable=False)
    content_id: Mapped[str] = mapped_column(String(64), nullable=False)
    reason: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[ReportStatus] = mapped_column(
        string_enum(ReportStatus, name="report_status"),
        nullable=False,
        default=ReportStatus.PENDING,
        index=True,
    )
    resolution: Mapped[str | None] = mapped_column(Text)
    reviewed_by: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="SET NULL")
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(UTCDateTime())

    reporter: Mapped[User] = relationship(foreign_keys=[reporter_id], lazy="selectin")


class Blog(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "blogs"

    author_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(280), nullable=False, unique=True)
    excerpt: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cover_image: Mapped[str | None] = mapped_column(String(1024))
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[datetime | None] = mapped_column(UTCDateTime())
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    author: Mapped[User] = relationship(lazy="selectin")


__all__ = ["Blog", "ReportedContent", "Review"]
