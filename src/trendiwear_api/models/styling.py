"""Style inspiration models: events, curated outfits and body measurements."""

from __future__ import annotations

import uuid

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trendiwear_api.db import Base, TimestampMixin, UUIDPrimaryKeyMixin, UUIDType
from trendiwear_api.db.enums import string_enum

from .catalog import Product
from .enums import BodyType
from .professional import ProfessionalProfile
from .user import User


class Event(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Occasion (wedding, gala, interview) that outfits are curated for."""

    __tablename__ = "events"

    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    dress_codes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    seasonality: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class OutfitInspiration(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A styled look for an event, optionally linking the products it uses."""

    __tablename__ = "outfit_inspirations"

    event_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("events.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    stylist_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    outfit_image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    total_price: Mapped[float | None] = mapped_column(Float)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    event: Mapped[Event] = relationship(lazy="selectin")
    stylist: Mapped[User] = relationship(lazy="selectin")
    stylist_profile: Mapped[ProfessionalProfile | None] = relationship(
        primaryjoin="OutfitInspiration.stylist_id == foreign(ProfessionalProfile.user_id)",
        viewonly=True,
        uselist=False,
        lazy="selectin",
    )
    products: Mapped[list[OutfitProduct]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="OutfitProduct.position",
    )

    @property
    def stylist_business_name(self) -> str | None:
        return self.stylist_profile.business_name if self.stylist_profile else None


class OutfitProduct(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "outfit_products"
    __table_args__ = (UniqueConstraint("outfit_id", "product_id"),)

    outfit_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(),
        ForeignKey("outfit_inspirations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(Text)

    product: Mapped[Product] = relationship(lazy="selectin")


class SavedOutfit(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "saved_outfits"
    __table_args__ = (UniqueConstraint("user_id", "outfit_id"),)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    outfit_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(),
        ForeignKey("outfit_inspirations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    outfit: Mapped[OutfitInspiration] = relationship(lazy="selectin")


class Measurement(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A user's body measurements (centimetres, kilograms) and style profile."""

    __tablename__ = "measurements"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    bust: Mapped[float | None] = mapped_column(Float)
    waist: Mapped[float | None] = mapped_column(Float)
    hips: Mapped[float | None] = mapped_column(Float)
    shoulder: Mapped[float | None] = mapped_column(Float)
    arm_length: Mapped[float | None] = mapped_column(Float)
    inseam: Mapped[float | None] = mapped_column(Float)
    height: Mapped[float | None] = mapped_column(Float)
    weight: Mapped[float | None] = mapped_column(Float)
    top_size: Mapped[str | None] = mapped_column(String(20))
    bottom_size: Mapped[str | None] = mapped_column(String(20))
    dress_size: Mapped[str | None] = mapped_column(String(20))
    shoe_size: Mapped[str | None] = mapped_column(String(20))
    body_type: Mapped[BodyType | None] = mapped_column(
        string_enum(BodyType, name="body_type", length=30)
    )
    style_preferences: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    preferred_colors: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    notes: Mapped[str | None] = mapped_column(Text)


__all__ = ["Event", "Measurement", "OutfitInspiration", "OutfitProduct", "SavedOutfit"]
