"""
Activities模块的请求和响应模式

定义活动相关API接口的输入输出数据结构：
- ActivityRequest: 创建活动的请求体
- ActivityCreatedResponse: 创建成功后返回活动编码
- Activity: 单个活动
- DayActivities: 某一天的活动列表（按天分桶后的输出）
"""

from typing import List
import datetime

from pydantic import Field
from ..schemas import CamelModel


class ActivityRequest(CamelModel):
    """创建活动的请求体"""
    title: str
    occurs_at: str = Field(..., description="活动时间，ISO-8601，时区偏移会被忽略")


class ActivityCreatedResponse(CamelModel):
    """创建活动的响应"""
    activity_code: str


class Activity(CamelModel):
    """活动响应模型"""
    trip_code: str
    code: str
    title: str
    occurs_at: datetime.datetime


class DayActivities(CamelModel):
    """某一天的活动"""
    date: datetime.datetime = Field(..., description="该天对应的日期（由行程开始时间按天递增得到）")
    activities: List[Activity] = Field(default_factory=list, description="当天活动，按时间升序")
