from sqlalchemy.orm import Session
from . import models
from ..trips.models import Trip, new_code


def get_links_by_trip(db: Session, trip_id: int):
    """获取某个行程的全部链接，按创建顺序"""
    return (
        db.query(models.Link)
        .filter(models.Link.trip_id == trip_id)
        .order_by(models.Link.id)
        .all()
    )


def create_link(db: Session, trip: Trip, title: str, url: str):
    """为行程登记一条参考链接"""
    db_link = models.Link(code=new_code(), trip_id=trip.id, title=title, url=url)
    db.add(db_link)
    db.commit()
    db.refresh(db_link)
    return db_link
