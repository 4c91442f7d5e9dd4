"""
Activities模块的数据模型

Activity 类：行程中安排的一项活动，对应 activities 表。
occurs_at 按本地时间（不带时区）存储：前端传入的偏移量在解析时丢弃，只保留墙上时间。
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..db_base import Base
from ..trips.models import new_code


class Activity(Base):
    """行程活动表"""
    __tablename__ = 'activities'

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(36), unique=True, index=True, nullable=False, default=new_code, comment="对外编码")
    trip_id = Column(Integer, ForeignKey('trips.id', ondelete='CASCADE'), nullable=False, index=True, comment="所属行程")
    title = Column(String(255), nullable=False, comment="活动标题")
    occurs_at = Column(DateTime, nullable=False, comment="活动时间（本地时间）")
    trip = relationship('Trip', back_populates='activities')
