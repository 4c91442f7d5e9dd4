"""
本文件定义了行程活动相关的API路由。

提供以下API端点：
1. GET /trips/{trip_code}/activities - 按天分组返回行程的活动（每天一个桶，含空桶）
2. POST /trips/{trip_code}/activities - 创建活动
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from . import crud, schemas
from ..core.itinerary import bucket_activities
from ..core.time_utils import parse_local_datetime
from ..trips.router import require_trip
from ..utils import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_code}/activities", tags=["活动"])


@router.get("", response_model=list[schemas.DayActivities])
def read_trip_activities(trip_code: str, db: Session = Depends(get_db)):
    """获取行程活动，按行程的每一天分桶，桶内按时间升序"""
    db_trip = require_trip(db, trip_code)
    activities = [
        schemas.Activity(trip_code=db_trip.code, code=a.code, title=a.title, occurs_at=a.occurs_at)
        for a in crud.get_activities_by_trip(db, db_trip.id)
    ]
    buckets = bucket_activities(db_trip.starts_at, db_trip.ends_at, activities)
    logger.debug("[activities][bucketed] trip=%s days=%s activities=%s", trip_code, len(buckets), len(activities))
    return [schemas.DayActivities(date=bucket.date, activities=bucket.activities) for bucket in buckets]


@router.post("", response_model=schemas.ActivityCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_trip_activity(trip_code: str, payload: schemas.ActivityRequest, db: Session = Depends(get_db)):
    """为行程创建活动"""
    db_trip = require_trip(db, trip_code)
    try:
        occurs_at = parse_local_datetime(payload.occurs_at)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    db_activity = crud.create_activity(db, db_trip, payload.title, occurs_at)
    logger.info("[activities][created] trip=%s activity=%s", trip_code, db_activity.code)
    return schemas.ActivityCreatedResponse(activity_code=db_activity.code)
