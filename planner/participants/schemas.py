"""
参与者相关的请求和响应模式。
"""

from typing import Optional
import datetime

from ..schemas import CamelModel


class ParticipantInviteRequest(CamelModel):
    """邀请参与者的请求体"""
    email: str


class ParticipantConfirmRequest(CamelModel):
    """参与者确认参与时的请求体"""
    name: str


class ParticipantInvitedResponse(CamelModel):
    """邀请成功的响应"""
    participant_code: str


class Participant(CamelModel):
    """参与者响应模型"""
    trip_code: str
    code: str
    name: Optional[str] = None
    email: str
    confirmed_at: Optional[datetime.datetime] = None
