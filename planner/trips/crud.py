"""
本文件包含行程相关的数据库操作函数（CRUD操作）。

提供以下功能：
1. 按编码查询行程（查不到返回 None，由调用方判断）
2. 行程的创建、更新
3. 行程确认
"""

import datetime

from sqlalchemy.orm import Session
from . import models


def get_trip_by_code(db: Session, code: str):
    """根据对外编码获取行程，不存在时返回 None"""
    return db.query(models.Trip).filter(models.Trip.code == code).first()


def create_trip(
    db: Session,
    destination: str,
    starts_at: datetime.datetime,
    ends_at: datetime.datetime,
    owner_name: str,
    owner_email: str,
):
    """创建新行程（未确认状态）"""
    db_trip = models.Trip(
        code=models.new_code(),
        destination=destination,
        starts_at=starts_at,
        ends_at=ends_at,
        owner_name=owner_name,
        owner_email=owner_email,
        confirmed_at=None,
    )
    db.add(db_trip)
    db.commit()
    db.refresh(db_trip)
    return db_trip


def update_trip(
    db: Session,
    db_trip: models.Trip,
    destination: str,
    starts_at: datetime.datetime,
    ends_at: datetime.datetime,
    owner_name: str,
    owner_email: str,
):
    """整体替换行程的可编辑字段"""
    db_trip.destination = destination
    db_trip.starts_at = starts_at
    db_trip.ends_at = ends_at
    db_trip.owner_name = owner_name
    db_trip.owner_email = owner_email
    db.commit()
    db.refresh(db_trip)
    return db_trip


def confirm_trip(db: Session, db_trip: models.Trip, confirmed_at: datetime.datetime = None):
    """标记行程为已确认；是否已确认由调用方先行检查"""
    db_trip.confirmed_at = confirmed_at or datetime.datetime.now(datetime.UTC)
    db.commit()
    db.refresh(db_trip)
    return db_trip
