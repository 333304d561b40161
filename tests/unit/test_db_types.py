from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta, timezone

from sqlalchemy.dialects import postgresql, sqlite

from trendiwear_api.db.types import UTCDateTime, UUIDType

SQLITE = sqlite.dialect()
POSTGRES = postgresql.dialect()


def test_uuid_type_binds_text_on_sqlite_and_uuid_on_postgres() -> None:
    value = uuid.uuid4()
    column = UUIDType()

    assert column.process_bind_param(value, SQLITE) == str(value)
    assert column.process_bind_param(str(value).upper(), SQLITE) == str(value)
    assert column.process_bind_param(str(value), POSTGRES) == value
    assert column.process_bind_param(None, SQLITE) is None


def test_uuid_type_reads_back_uuid_objects() -> None:
    value = uuid.uuid4()
    column = UUIDType()

    assert column.process_result_value(str(value), SQLITE) == value
    assert column.process_result_value(value, POSTGRES) is value
    assert column.python_type is uuid.UUID


def test_utc_datetime_normalises_offsets_and_naive_values() -> None:
    column = UTCDateTime()
    nairobi = timezone(timedelta(hours=3))
    expected = datetime(2026, 4, 1, 9, 0, tzinfo=UTC)

    assert column.process_bind_param(datetime(2026, 4, 1, 12, 0, tzinfo=nairobi), SQLITE) == (
        expected
    )
    assert column.process_result_value(datetime(2026, 4, 1, 9, 0), SQLITE) == expected
    assert column.process_result_value(None, SQLITE) is None
