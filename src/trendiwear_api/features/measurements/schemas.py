from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from trendiwear_api.common.schema import BaseSchema
from trendiwear_api.models import BodyType, StylePreference


class MeasurementOut(BaseSchema):
    id: UUID
    user_id: UUID
    bust: float | None = None
    waist: float | None = None
    hips: float | None = None
    shoulder: float | None = None
    arm_length: float | None = None
    inseam: float | None = None
    height: float | None = None
    weight: float | None = None
    top_size: str | None = None
    bottom_size: str | None = None
    dress_size: str | None = None
    shoe_size: str | None = None
    body_type: BodyType | None = None
    style_preferences: list[StylePreference] = Field(default_factory=list)
    preferred_colors: list[str] = Field(default_factory=list)
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class MeasurementEnvelope(BaseSchema):
    measurements: MeasurementOut | None = None


class MeasurementUpsert(BaseSchema):
    """Fields left out of the request keep their stored value."""

    bust: float | None = Field(default=None, gt=0, le=300)
    waist: float | None = Field(default=None, gt=0, le=300)
    hips: float | None = Field(default=None, gt=0, le=300)
    shoulder: float | None = Field(default=None, gt=0, le=300)
    arm_length: float | None = Field(default=None, gt=0, le=300)
    inseam: float | None = Field(default=None, gt=0, le=300)
    height: float | None = Field(default=None, gt=0, le=300)
    weight: float | None = Field(default=None, gt=0, le=500)
    top_size: str | None = Field(default=None, max_length=20)
    bottom_size: str | None = Field(default=None, max_length=20)
    dress_size: str | None = Field(default=None, max_length=20)
    shoe_size: str | None = Field(default=None, max_length=20)
    body_type: BodyType | None = None
    style_preferences: list[StylePreference] | None = None
    preferred_colors: list[str] | None = None
    notes: str | None = None


__all__ = ["MeasurementEnvelope", "MeasurementOut", "MeasurementUpsert"]
