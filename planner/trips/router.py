"""
本文件定义了行程相关的API路由。

提供以下API端点：
1. POST /trips - 创建行程（同时登记创建者和受邀者）
2. GET /trips/{trip_code} - 获取行程信息
3. PUT /trips/{trip_code} - 更新行程信息
4. PATCH /trips/{trip_code}/confirm - 确认行程并通知所有参与者
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session
from . import crud, schemas
from ..core.time_utils import parse_zoned_datetime
from ..schemas import MessageResponse
from ..services.participant_service import participant_service
from ..utils import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["行程"])


def require_trip(db: Session, trip_code: str):
    """按编码查询行程，不存在时抛出 404"""
    db_trip = crud.get_trip_by_code(db, trip_code)
    if db_trip is None:
        raise HTTPException(status_code=404, detail="行程未找到")
    return db_trip


def _parse_trip_range(payload: schemas.TripRequest):
    try:
        return parse_zoned_datetime(payload.starts_at), parse_zoned_datetime(payload.ends_at)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("", response_model=schemas.TripCreateResponse, status_code=status.HTTP_201_CREATED)
def create_trip(payload: schemas.TripRequest, background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    """创建新行程，创建者自动成为已确认的参与者，受邀邮箱登记为待确认参与者"""
    starts_at, ends_at = _parse_trip_range(payload)
    db_trip = crud.create_trip(
        db,
        destination=payload.destination,
        starts_at=starts_at,
        ends_at=ends_at,
        owner_name=payload.owner_name,
        owner_email=payload.owner_email,
    )
    participant_service.register_participants_to_event(
        db, db_trip, payload.owner_name, payload.owner_email, payload.emails_to_invite
    )
    participant_service.trigger_trip_created_email(background_tasks, db_trip)
    logger.info("[trip][created] code=%s destination=%s", db_trip.code, db_trip.destination)
    return schemas.TripCreateResponse(trip_code=db_trip.code)


@router.get("/{trip_code}", response_model=schemas.Trip)
def read_trip(trip_code: str, db: Session = Depends(get_db)):
    """获取单个行程信息"""
    return require_trip(db, trip_code)


@router.put("/{trip_code}", response_model=schemas.Trip)
def update_trip(trip_code: str, payload: schemas.TripRequest, db: Session = Depends(get_db)):
    """更新行程信息（目的地、起止时间、创建者信息）；emailsToInvite 在这里被忽略"""
    db_trip = require_trip(db, trip_code)
    starts_at, ends_at = _parse_trip_range(payload)
    return crud.update_trip(
        db,
        db_trip,
        destination=payload.destination,
        starts_at=starts_at,
        ends_at=ends_at,
        owner_name=payload.owner_name,
        owner_email=payload.owner_email,
    )


@router.patch("/{trip_code}/confirm", response_model=MessageResponse)
def confirm_trip(trip_code: str, background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    """确认行程；已确认的行程返回 400"""
    db_trip = require_trip(db, trip_code)
    if db_trip.is_confirmed:
        raise HTTPException(status_code=400, detail="Trip already confirmed")

    crud.confirm_trip(db, db_trip)
    participant_service.trigger_confirmation_email_to_participants(background_tasks, db, db_trip)
    logger.info("[trip][confirmed] code=%s", db_trip.code)
    return MessageResponse(message="Trip confirmed")
