"""
本文件定义了参与者相关的API路由。

提供以下API端点：
1. GET /trips/{trip_code}/participants - 获取行程的参与者列表
2. POST /trips/{trip_code}/invite - 邀请参与者（行程已确认时立即发送邀请邮件）
3. DELETE /trips/{trip_code}/participants/{participant_code} - 移除参与者
4. GET /participants/{participant_code} - 获取单个参与者
5. PATCH /participants/{participant_code}/confirm - 参与者确认参加
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from . import crud, schemas
from ..services.participant_service import participant_service
from ..trips.router import require_trip
from ..utils import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["参与者"])


@router.get("/trips/{trip_code}/participants", response_model=list[schemas.Participant])
def read_trip_participants(trip_code: str, db: Session = Depends(get_db)):
    """获取行程的参与者列表"""
    db_trip = require_trip(db, trip_code)
    return [
        schemas.Participant(
            trip_code=db_trip.code,
            code=p.code,
            name=p.name,
            email=p.email,
            confirmed_at=p.confirmed_at,
        )
        for p in crud.get_participants_by_trip(db, db_trip.id)
    ]


@router.post(
    "/trips/{trip_code}/invite",
    response_model=schemas.ParticipantInvitedResponse,
    status_code=status.HTTP_201_CREATED,
)
def invite_participant(
    trip_code: str,
    payload: schemas.ParticipantInviteRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """邀请一位参与者；行程已确认时立即安排邀请邮件，否则等行程确认时统一发送"""
    db_trip = require_trip(db, trip_code)
    participant = participant_service.register_participant_to_event(db, payload.email, db_trip)
    if db_trip.is_confirmed:
        participant_service.trigger_confirmation_email_to_participant(background_tasks, payload.email, db_trip)
    return schemas.ParticipantInvitedResponse(participant_code=participant.code)


@router.delete(
    "/trips/{trip_code}/participants/{participant_code}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def remove_participant(trip_code: str, participant_code: str, db: Session = Depends(get_db)):
    """从行程中移除参与者"""
    db_trip = require_trip(db, trip_code)
    db_participant = crud.get_participant_by_code(db, participant_code, trip_id=db_trip.id)
    if db_participant is None:
        raise HTTPException(status_code=404, detail="参与者未找到")
    crud.delete_participant(db, db_participant)
    logger.info("[participants][removed] trip=%s participant=%s", trip_code, participant_code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/participants/{participant_code}", response_model=schemas.Participant)
def read_participant(participant_code: str, db: Session = Depends(get_db)):
    """获取单个参与者"""
    db_participant = crud.get_participant_by_code(db, participant_code)
    if db_participant is None:
        raise HTTPException(status_code=404, detail="参与者未找到")
    return db_participant


@router.patch("/participants/{participant_code}/confirm", response_model=schemas.Participant)
def confirm_participant(
    participant_code: str,
    payload: schemas.ParticipantConfirmRequest,
    db: Session = Depends(get_db),
):
    """参与者确认参加行程；重复确认返回 400"""
    db_participant = crud.get_participant_by_code(db, participant_code)
    if db_participant is None:
        raise HTTPException(status_code=404, detail="参与者未找到")
    if db_participant.confirmed_at is not None:
        raise HTTPException(status_code=400, detail="Participant already confirmed")
    return crud.confirm_participant(db, db_participant, payload.name)
