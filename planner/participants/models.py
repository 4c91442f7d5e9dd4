"""
本文件定义了参与者相关的数据模型（ORM类），对应 participants 表。

Participant 类：某个行程的一位参与者。
- 行程创建者在创建行程时即登记为参与者，并直接视为已确认；
- 被邀请的人只有邮箱，name 和 confirmed_at 为空，直到本人确认参与。
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..db_base import Base, ZonedDateTime
from ..trips.models import new_code


class Participant(Base):
    """
    参与者表模型
    - id: 主键
    - code: 对外编码（UUID），唯一
    - trip_id: 外键，关联到 Trip
    - name: 姓名（确认前可为空）
    - email: 邮箱
    - confirmed_at: 确认参与的时间，未确认时为空
    """
    __tablename__ = 'participants'
    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(36), unique=True, index=True, nullable=False, default=new_code)
    trip_id = Column(Integer, ForeignKey('trips.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(128), nullable=True)
    email = Column(String(255), nullable=False)
    confirmed_at = Column(ZonedDateTime, nullable=True)
    trip = relationship('Trip', back_populates='participants')

    @property
    def trip_code(self) -> str:
        return self.trip.code
