"""
本文件定义了行程相关的Pydantic数据模型，用于API请求和响应的数据验证与序列化。

包含以下模型：
1. TripRequest: 创建/更新行程时的请求模型（时间字段为字符串，由路由层解析）
2. TripCreateResponse: 创建行程的响应（只返回行程编码）
3. Trip: 行程完整响应模型
"""

from typing import List, Optional
import datetime

from pydantic import Field
from ..schemas import CamelModel


class TripRequest(CamelModel):
    """创建/更新行程时的请求模型"""
    destination: str
    starts_at: str = Field(..., description="开始时间，ISO-8601 且带时区偏移")
    ends_at: str = Field(..., description="结束时间，ISO-8601 且带时区偏移")
    owner_name: str
    owner_email: str
    emails_to_invite: List[str] = Field(default_factory=list, description="创建时一并邀请的邮箱（更新时忽略）")


class TripCreateResponse(CamelModel):
    """创建行程的响应"""
    trip_code: str


class Trip(CamelModel):
    """行程完整响应模型"""
    code: str
    destination: str
    starts_at: datetime.datetime
    ends_at: datetime.datetime
    confirmed_at: Optional[datetime.datetime] = None
    owner_name: str
    owner_email: str
