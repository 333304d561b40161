"""Catalog models: categories, collections and products."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from trendiwear_api.db import Base, TimestampMixin, UTCDateTime, UUIDPrimaryKeyMixin, UUIDType
from trendiwear_api.db.enums import string_enum

from .enums import Gender, Season
from .user import User


class Category(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Product category; categories nest through ``parent_id``."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    slug: Mapped[str] = mapped_column(String(160), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("categories.id", ondelete="RESTRICT"), index=True
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    parent: Mapped[Category | None] = relationship(
        remote_side="Category.id", lazy="selectin", join_depth=1
    )


class Collection(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Curated, optionally seasonal grouping of products."""

    __tablename__ = "collections"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    slug: Mapped[str] = mapped_column(String(160), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    category_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("categories.id", ondelete="RESTRICT"), index=True
    )
    season: Mapped[Season | None] = mapped_column(string_enum(Season, name="season"))
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    category: Mapped[Category | None] = relationship(lazy="selectin")


class Product(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Item listed for sale by a professional."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    collection_id: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("collections.id", ondelete="RESTRICT"), index=True
    )
    professional_id: Mapped[uuid.UUID] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sizes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    colors: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    material: Mapped[str | None] = mapped_column(String(200))
    care_instructions: Mapped[str | None] = mapped_column(Text)
    estimated_delivery: Mapped[int | None] = mapped_column(Integer)
    is_customizable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    gender: Mapped[Gender] = mapped_column(
        string_enum(Gender, name="gender"), nullable=False, default=Gender.UNISEX
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cart_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sold_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_showcase_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    approved_at: Mapped[datetime | None] = mapped_column(UTCDateTime())
    approved_by: Mapped[uuid.UUID | None] = mapped_column(
        UUIDType(), ForeignKey("users.id", ondelete="SET NULL")
    )

    category: Mapped[Category] = relationship(lazy="selectin")
    collection: Mapped[Collection | None] = relationship(lazy="selectin")
    professional: Mapped[User] = relationship(foreign_keys=[professional_id], lazy="selectin")

    @property
    def is_available(self) -> bool:
        return self.is_active and self.is_in_stock


__all__ = ["Category", "Collection", "Product"]
