"""Professional (designer/tailor) profiles and their lookup tables."""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trendiwear_api.db import Base, TimestampMixin, UUIDPrimaryKeyMixin, UUIDType

from .user import User


class ProfessionalType(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Specialization a professional can register under (tailor, stylist, ...)."""

    __tablename__ = "professional_types"

    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class ProfessionalProfile(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Public business profile owned by a user with the PROFESSIONAL role."""

    __tablename__ = "professional_profiles"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    slug: Mapped[str] = mapped_column(String(160), nullable=False, unique=True)
    business_name: Mapped[str | None] = mapped_column(String(200))
    business_image: Mapped[str | None] = mapped_column(String(1024))
    specialization_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(),
        ForeignKey("professional_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bio: Mapped[str | None] = mapped_column(Text)
    portfolio_url: Mapped[str | None] = mapped_column(String(1024))
    location: Mapped[str | None] = mapped_column(String(200))
    availability: Mapped[str | None] = mapped_column(String(200))
    free_delivery_threshold: Mapped[float | None] = mapped_column(Float)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    user: Mapped[User] = relationship(lazy="selectin")
    specialization: Mapped[ProfessionalType] = relationship(lazy="selectin")
    social_media: Mapped[list[SocialMedia]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="SocialMedia.platform",
    )
    delivery_zones: Mapped[list[DeliveryZone]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="DeliveryZone.zone_name",
    )


class SocialMedia(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "professional_social_media"

    profile_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(),
        ForeignKey("professional_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    platform: Mapped[str] = mapped_column(String(50), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)


class DeliveryZone(UUIDPrimaryKeyMixin, Base):
    """Shipping fee and lead time a professional charges for a named zone."""

    __tablename__ = "professional_delivery_zones"

    profile_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(),
        ForeignKey("professional_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    zone_name: Mapped[str] = mapped_column(String(120), nullable=False)
    delivery_fee: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    estimated_days: Mapped[int] = mapped_column(Integer, nullable=False, default=3)


__all__ = ["DeliveryZone", "ProfessionalProfile", "ProfessionalType", "SocialMedia"]
