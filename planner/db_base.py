# 统一的 SQLAlchemy 声明式基类，所有 ORM 模型（trips/participants/activities/links）都继承它，
# 这样 Base.metadata 中能拿到全部表，用于建表和测试清理。

import datetime

from sqlalchemy import String
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class ZonedDateTime(TypeDecorator):
    """
    带时区偏移的时间列。

    MySQL 的 DATETIME 和 SQLite 都不保存时区偏移，这里把时间按 ISO-8601 字符串
    （如 2024-03-01T09:00:00-03:00）落库，读取时还原成带偏移的 datetime。
    只接受带时区的 datetime；按字符串排序不等于按时间排序，需要排序时在 Python 中进行。
    """
    impl = String(40)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(f"ZonedDateTime 需要带时区的时间，收到：{value!r}")
        return value.isoformat()

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return datetime.datetime.fromisoformat(value)
