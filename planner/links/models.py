"""
本文件定义了行程参考链接的数据模型（ORM类），对应 links 表。
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..db_base import Base
from ..trips.models import new_code


class Link(Base):
    """
    链接表模型
    - code: 对外编码（UUID）
    - trip_id: 外键，关联到 Trip
    - title: 链接标题（如「酒店预订」）
    - url: 链接地址
    """
    __tablename__ = 'links'
    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(36), unique=True, index=True, nullable=False, default=new_code)
    trip_id = Column(Integer, ForeignKey('trips.id', ondelete='CASCADE'), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    url = Column(String(2048), nullable=False)
    trip = relationship('Trip', back_populates='links')
