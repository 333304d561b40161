from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import Measurement, User

from .schemas import MeasurementEnvelope, MeasurementOut, MeasurementUpsert

logger = logging.getLogger(__name__)

_LIST_FIELDS = {"style_preferences", "preferred_colors"}


class MeasurementsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def get_measurements(self, *, user: User) -> MeasurementEnvelope:
        measurement = await self._find(user)
        if measurement is None:
            return MeasurementEnvelope(measurements=None)
        return MeasurementEnvelope(measurements=MeasurementOut.model_validate(measurement))

    async def upsert(self, *, user: User, payload: MeasurementUpsert) -> MeasurementOut:
        """Create the caller's measurements or merge the sent fields into them."""

        updates = payload.model_dump(exclude_unset=True)
        for field in _LIST_FIELDS:
            if field in updates and updates[field] is None:
                updates[field] = []

        measurement = await self._find(user)
        created = measurement is None
        if measurement is None:
            measurement = Measurement(user_id=user.id, **updates)
            self._session.add(measurement)
        else:
            for key, value in updates.items():
                setattr(measurement, key, value)
        await self._session.flush()
        await self._session.refresh(measurement)

        logger.info(
            "measurements.upsert.success",
            extra=log_context(
                user_id=str(user.id), created=created, fields=",".join(sorted(updates))
            ),
        )
        return MeasurementOut.model_validate(measurement)

    async def _find(self, user: User) -> Measurement | None:
        stmt = select(Measurement).where(Measurement.user_id == user.id)
        return (await self._session.execute(stmt)).scalar_one_or_none()


__all__ = ["MeasurementsService"]
