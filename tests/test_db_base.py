from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.dialects import sqlite

from planner.db_base import ZonedDateTime

column_type = ZonedDateTime()
dialect = sqlite.dialect()


def test_zoned_datetime_keeps_offset():
    value = datetime(2024, 3, 1, 23, 0, tzinfo=timezone(timedelta(hours=-3)))

    stored = column_type.process_bind_param(value, dialect)
    loaded = column_type.process_result_value(stored, dialect)

    assert stored == "2024-03-01T23:00:00-03:00"
    assert loaded.utcoffset() == timedelta(hours=-3)
    # 与另一个偏移的时间比较时按真实时刻
    assert loaded > datetime(2024, 3, 2, 1, 0, tzinfo=timezone.utc)


def test_zoned_datetime_rejects_naive_value():
    with pytest.raises(ValueError):
        column_type.process_bind_param(datetime(2024, 3, 1, 9, 0), dialect)


def test_zoned_datetime_passes_none_through():
    assert column_type.process_bind_param(None, dialect) is None
    assert column_type.process_result_value(None, dialect) is None
