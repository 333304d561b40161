"""Bookable services and the bookings made against them."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trendiwear_api.db import Base, TimestampMixin, UTCDateTime, UUIDPrimaryKeyMixin, UUIDType
from trendiwear_api.db.enums import string_enum

from .enums import BookingStatus
from .user import User


class ServiceCategory(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "service_categories"

    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Service(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Base service definition shared by every professional offering it."""

    __tablename__ = "services"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("service_categories.id", ondelete="RESTRICT"), nullable=False,
        index=True,
    )
    is_home_service: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    requirements: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    category: Mapped[ServiceCategory] = relationship(lazy="selectin")


class ProfessionalService(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A professional's priced offering of a base :class:`Service`."""

    __tablename__ = "professional_services"
    __table_args__ = (UniqueConstraint("professional_id", "service_id"),)

    professional_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("services.id", ondelete="CASCADE"), nullable=False, index=True
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    service: Mapped[Service] = relationship(lazy="selectin")


class Booking(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "bookings"

    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    professional_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="SET NULL"), index=True
    )
    service_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("services.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    booking_date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    end_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255))
    notes: Mapped[str | None] = mapped_column(Text)
    price: Mapped[float | None] = mapped_column(Float)
    status: Mapped[BookingStatus] = mapped_column(
        string_enum(BookingStatus, name="booking_status"),
        nullable=False,
        default=BookingStatus.PENDING,
    )

    service: Mapped[Service] = relationship(lazy="selectin")
    customer: Mapped[User] = relationship(foreign_keys=[customer_id], lazy="selectin")
    professional: Mapped[User | None] = relationship(
        foreign_keys=[professional_id], lazy="selectin"
    )


__all__ = ["Booking", "ProfessionalService", "Service", "ServiceCategory"]
