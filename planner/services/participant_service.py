"""
Participant Service（参与者服务）

职责：
- 创建行程时登记创建者（直接视为已确认）和受邀邮箱
- 单个邀请的登记
- 把邮件通知交给 FastAPI 的 BackgroundTasks，在响应返回后异步执行（调用方不等待结果）
"""

from typing import Iterable
import datetime
import logging

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from ..participants import crud as participant_crud
from ..trips.models import Trip
from .notification_service import TripNotice, notification_service

logger = logging.getLogger(__name__)


class ParticipantService:
    """参与者服务"""

    def register_participants_to_event(
        self,
        db: Session,
        trip: Trip,
        owner_name: str,
        owner_email: str,
        emails_to_invite: Iterable[str],
    ):
        """登记创建者和受邀者，一次提交。返回创建者对应的参与者记录"""
        owner = participant_crud.create_participant(
            db,
            trip,
            email=owner_email,
            name=owner_name,
            confirmed_at=datetime.datetime.now(datetime.UTC),
            commit=False,
        )
        invited = [
            participant_crud.create_participant(db, trip, email=email, commit=False)
            for email in emails_to_invite
        ]
        db.commit()
        db.refresh(owner)
        logger.info("[participants][registered] trip=%s invited=%s", trip.code, len(invited))
        return owner

    def register_participant_to_event(self, db: Session, email: str, trip: Trip):
        """登记一位受邀参与者"""
        participant = participant_crud.create_participant(db, trip, email=email)
        logger.info("[participants][invited] trip=%s participant=%s", trip.code, participant.code)
        return participant

    def trigger_trip_created_email(self, background_tasks: BackgroundTasks, trip: Trip) -> None:
        background_tasks.add_task(
            notification_service.send_trip_created, trip.owner_email, TripNotice.from_trip(trip)
        )

    def trigger_confirmation_email_to_participants(
        self, background_tasks: BackgroundTasks, db: Session, trip: Trip
    ) -> None:
        """给行程的所有参与者安排邀请确认邮件"""
        notice = TripNotice.from_trip(trip)
        participants = participant_crud.get_participants_by_trip(db, trip.id)
        for participant in participants:
            background_tasks.add_task(notification_service.send_invitation, participant.email, notice)
        logger.info("[participants][notify-scheduled] trip=%s count=%s", trip.code, len(participants))

    def trigger_confirmation_email_to_participant(
        self, background_tasks: BackgroundTasks, email: str, trip: Trip
    ) -> None:
        background_tasks.add_task(notification_service.send_invitation, email, TripNotice.from_trip(trip))


participant_service = ParticipantService()
