"""
本文件定义了行程参考链接的API路由。

提供以下API端点：
1. GET /trips/{trip_code}/links - 获取行程的链接列表
2. POST /trips/{trip_code}/links - 登记链接
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from . import crud, schemas
from ..trips.router import require_trip
from ..utils import get_db

router = APIRouter(prefix="/trips/{trip_code}/links", tags=["链接"])


@router.get("", response_model=list[schemas.Link])
def read_trip_links(trip_code: str, db: Session = Depends(get_db)):
    """获取行程的链接列表"""
    db_trip = require_trip(db, trip_code)
    return [
        schemas.Link(trip_code=db_trip.code, code=link.code, title=link.title, url=link.url)
        for link in crud.get_links_by_trip(db, db_trip.id)
    ]


@router.post("", response_model=schemas.LinkCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_trip_link(trip_code: str, payload: schemas.LinkRequest, db: Session = Depends(get_db)):
    """为行程登记一条链接"""
    db_trip = require_trip(db, trip_code)
    db_link = crud.create_link(db, db_trip, payload.title, payload.url)
    return schemas.LinkCreatedResponse(link_code=db_link.code)
