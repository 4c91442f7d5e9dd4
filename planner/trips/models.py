"""
本文件定义了行程相关的数据模型（ORM类），对应 trips 表。

Trip 类：表示一次行程。对外只暴露 code（UUID 字符串），内部主键 id 仅用于外键关联。
参与者（participants）、活动（activities）、链接（links）都通过 trip_id 归属到某个行程，
删除行程时级联删除这些子记录。
"""

import datetime
import uuid

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from ..db_base import Base, ZonedDateTime


def new_code() -> str:
    """生成对外使用的唯一编码"""
    return str(uuid.uuid4())


class Trip(Base):
    """
    行程表模型
    - id: 主键
    - code: 对外编码（UUID），唯一
    - destination: 目的地
    - starts_at / ends_at: 行程起止时间（带时区偏移，见 ZonedDateTime）
    - confirmed_at: 确认时间，未确认时为空
    - owner_name / owner_email: 行程创建者
    - created_at: 创建时间
    """
    __tablename__ = 'trips'
    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(36), unique=True, index=True, nullable=False, default=new_code)
    destination = Column(String(255), nullable=False)
    starts_at = Column(ZonedDateTime, nullable=False)
    ends_at = Column(ZonedDateTime, nullable=False)
    confirmed_at = Column(ZonedDateTime, nullable=True)
    owner_name = Column(String(128), nullable=False)
    owner_email = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.datetime.now(datetime.UTC))

    participants = relationship('Participant', back_populates='trip', cascade='all, delete-orphan')
    activities = relationship('Activity', back_populates='trip', cascade='all, delete-orphan')
    links = relationship('Link', back_populates='trip', cascade='all, delete-orphan')

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed_at is not None
