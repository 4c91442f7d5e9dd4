"""
本文件包含行程活动相关的数据库操作函数（CRUD操作）。
"""

import datetime

from sqlalchemy.orm import Session
from . import models
from ..trips.models import Trip, new_code


def get_activities_by_trip(db: Session, trip_id: int):
    """获取某个行程的全部活动（未排序，排序和分桶在 core.itinerary 中完成）"""
    return db.query(models.Activity).filter(models.Activity.trip_id == trip_id).all()


def create_activity(db: Session, trip: Trip, title: str, occurs_at: datetime.datetime):
    """创建新活动，自动分配编码"""
    db_activity = models.Activity(
        code=new_code(),
        trip_id=trip.id,
        title=title,
        occurs_at=occurs_at,
    )
    db.add(db_activity)
    db.commit()
    db.refresh(db_activity)
    return db_activity
