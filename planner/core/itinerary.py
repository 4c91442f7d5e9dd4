"""行程日程分桶（itinerary bucketing）

把一个行程 [starts_at, ends_at] 内的活动按天分组：
- 从 starts_at 开始每次加 1 天生成日期序列，直到超过 ends_at 为止（包含两端）；
- 每个日期一个桶，桶内放 occurs_at 与该日期「一年中的第几天」相同的活动；
- 桶内按 occurs_at 升序（稳定排序），没有活动的日期也会输出空桶。

注意：匹配规则比较的是 day-of-year 而不是完整日期，所以跨年的同一天会被归到同一个桶里。
这个行为目前保持不变，修改前需要产品确认。
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Sequence

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DayBucket:
    """某一天的活动桶"""
    date: datetime
    activities: List[Any] = field(default_factory=list)

    @property
    def day(self):
        return self.date.date()


def dates_between(starts_at: datetime, ends_at: datetime) -> List[datetime]:
    """按固定 1 天步长生成 [starts_at, ends_at] 区间内的日期；starts_at > ends_at 时返回空列表。"""
    dates = []
    current = starts_at
    while not current > ends_at:
        dates.append(current)
        current = current + ONE_DAY
    return dates


def _day_of_year(value: datetime) -> int:
    return value.timetuple().tm_yday


def bucket_activities(
    starts_at: datetime,
    ends_at: datetime,
    activities: Iterable[Any],
) -> List[DayBucket]:
    """把活动分配到行程的每一天。

    参数：
        starts_at / ends_at: 行程起止时间
        activities: 任意带 `occurs_at` 属性的对象（ORM 行或响应模型）

    返回：
        按日期升序的 DayBucket 列表，长度等于行程覆盖的天数（含首尾）
    """
    items: Sequence[Any] = list(activities)
    buckets = []
    for date in dates_between(starts_at, ends_at):
        matched = [a for a in items if _day_of_year(a.occurs_at) == _day_of_year(date)]
        buckets.append(DayBucket(date=date, activities=sorted(matched, key=lambda a: a.occurs_at)))
    return buckets
