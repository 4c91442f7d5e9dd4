"""
本文件包含参与者相关的数据库操作函数（CRUD操作）。
"""

import datetime
from typing import Optional

from sqlalchemy.orm import Session
from . import models
from ..trips.models import Trip, new_code


def get_participant_by_code(db: Session, code: str, trip_id: Optional[int] = None):
    """根据编码获取参与者；传入 trip_id 时只在该行程内查找"""
    query = db.query(models.Participant).filter(models.Participant.code == code)
    if trip_id is not None:
        query = query.filter(models.Participant.trip_id == trip_id)
    return query.first()


def get_participants_by_trip(db: Session, trip_id: int):
    """获取某个行程的全部参与者，按登记顺序返回"""
    return (
        db.query(models.Participant)
        .filter(models.Participant.trip_id == trip_id)
        .order_by(models.Participant.id)
        .all()
    )


def create_participant(
    db: Session,
    trip: Trip,
    email: str,
    name: Optional[str] = None,
    confirmed_at: Optional[datetime.datetime] = None,
    commit: bool = True,
):
    """登记一位参与者。commit=False 时只 flush，由调用方统一提交"""
    db_participant = models.Participant(
        code=new_code(),
        trip_id=trip.id,
        email=email,
        name=name,
        confirmed_at=confirmed_at,
    )
    db.add(db_participant)
    if commit:
        db.commit()
        db.refresh(db_participant)
    else:
        db.flush()
    return db_participant


def confirm_participant(db: Session, db_participant: models.Participant, name: str):
    """参与者确认参与，写入姓名和确认时间"""
    db_participant.name = name
    db_participant.confirmed_at = datetime.datetime.now(datetime.UTC)
    db.commit()
    db.refresh(db_participant)
    return db_participant


def delete_participant(db: Session, db_participant: models.Participant) -> None:
    """删除参与者"""
    db.delete(db_participant)
    db.commit()
