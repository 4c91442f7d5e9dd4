from datetime import datetime
from typing import Optional


def _parse_iso(value: Optional[str]) -> datetime:
    s = (value or '').strip()
    if not s:
        raise ValueError("时间不能为空")
    # 兼容 "Z" 结尾的 UTC 写法
    if s.endswith('Z') or s.endswith('z'):
        s = s[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        raise ValueError(f"时间格式错误，应为 ISO-8601（如 2024-03-01T09:00:00+08:00），收到：{value}")


def parse_zoned_datetime(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 date-time that carries a UTC offset (trip start/end).

    Raises ValueError when the string is malformed or has no offset.
    """
    parsed = _parse_iso(value)
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ValueError(f"时间缺少时区偏移（如 +08:00 或 Z），收到：{value}")
    return parsed


def parse_local_datetime(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 date-time as local wall-clock time (activity occursAt).

    An offset, if present, is dropped without converting the time.
    """
    return _parse_iso(value).replace(tzinfo=None)
