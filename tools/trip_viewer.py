#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
行程数据查看工具

用于在命令行中查看数据库里的行程、参与者和按天分组的日程
包含查看、重建表等功能
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from planner.config import LOG_LEVEL
from planner.core.itinerary import bucket_activities
from planner.db_base import Base
from planner.logging_config import setup_logging
from planner.utils import engine as default_engine, load_models

load_models()

from planner.activities.models import Activity  # noqa: E402
from planner.links.models import Link  # noqa: E402
from planner.participants.models import Participant  # noqa: E402
from planner.trips.models import Trip  # noqa: E402


class TripViewer:
    """行程数据查看器"""

    def __init__(self, engine=None):
        """初始化数据库连接，默认使用 planner.utils 中的 engine"""
        self.engine = engine if engine is not None else default_engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def get_database_status(self):
        """获取各表记录数"""
        with self.SessionLocal() as session:
            counts = {
                "trips": session.query(func.count(Trip.id)).scalar(),
                "participants": session.query(func.count(Participant.id)).scalar(),
                "activities": session.query(func.count(Activity.id)).scalar(),
                "links": session.query(func.count(Link.id)).scalar(),
            }
        counts["total"] = sum(counts.values())
        return counts

    def get_trips_summary(self):
        """获取行程列表（按开始时间）"""
        with self.SessionLocal() as session:
            # starts_at 以带偏移的字符串落库，只能在 Python 中按真实时间排序
            trips = sorted(session.query(Trip).all(), key=lambda t: t.starts_at)
            return [
                {
                    "code": t.code,
                    "destination": t.destination,
                    "starts_at": t.starts_at,
                    "ends_at": t.ends_at,
                    "confirmed": t.is_confirmed,
                    "participants": len(t.participants),
                }
                for t in trips
            ]

    def get_itinerary(self, trip_code: str):
        """获取行程按天分组的日程；行程不存在返回 None"""
        with self.SessionLocal() as session:
            trip = session.query(Trip).filter(Trip.code == trip_code).first()
            if trip is None:
                return None
            buckets = bucket_activities(trip.starts_at, trip.ends_at, trip.activities)
            return [
                (bucket.day, [(a.occurs_at, a.title) for a in bucket.activities])
                for bucket in buckets
            ]

    def drop_and_recreate_tables(self):
        """删除并重新创建所有表"""
        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        return True


def main():
    """主函数"""
    setup_logging(LOG_LEVEL)
    print("🔍 行程数据查看工具")
    print("=" * 50)

    viewer = TripViewer()

    while True:
        print("\n选择操作:")
        print("1. 查看数据库状态")
        print("2. 查看所有行程")
        print("3. 查看行程日程")
        print("4. 删除并重新创建表")
        print("0. 退出")

        choice = input("\n请输入选择: ").strip()

        if choice == "1":
            status = viewer.get_database_status()
            print("\n📊 当前数据库状态:")
            print("=" * 50)
            for table in ("trips", "participants", "activities", "links"):
                print(f"📋 {table}: {status[table]} 条记录")
            print("-" * 50)
            print(f"📈 总计: {status['total']} 条记录")

        elif choice == "2":
            trips = viewer.get_trips_summary()
            print(f"\n📋 所有行程 ({len(trips)} 个):")
            print("-" * 100)
            print(f"{'编码':<38} {'目的地':<20} {'开始':<12} {'结束':<12} {'已确认':<6} {'人数':<4}")
            print("-" * 100)
            for t in trips:
                print(
                    f"{t['code']:<38} {t['destination']:<20} {t['starts_at']:%Y-%m-%d}   "
                    f"{t['ends_at']:%Y-%m-%d}   {'是' if t['confirmed'] else '否':<6} {t['participants']:<4}"
                )

        elif choice == "3":
            trip_code = input("请输入行程编码: ").strip()
            itinerary = viewer.get_itinerary(trip_code)
            if itinerary is None:
                print(f"❌ 未找到行程: {trip_code}")
                continue
            print(f"\n🗓  行程日程 ({len(itinerary)} 天):")
            for day, activities in itinerary:
                print(f"\n{day.isoformat()}")
                if not activities:
                    print("  （无活动）")
                for occurs_at, title in activities:
                    print(f"  {occurs_at:%H:%M}  {title}")

        elif choice == "4":
            print("⚠️  警告：即将删除并重新创建所有表")
            confirm = input("请输入 'YES' 确认，或按回车取消: ").strip()
            if confirm == "YES":
                viewer.drop_and_recreate_tables()
                print("✅ 成功删除并重新创建所有表")
            else:
                print("❌ 操作已取消")

        elif choice == "0":
            print("👋 再见")
            break

        else:
            print("❌ 无效的选择")


if __name__ == "__main__":
    main()
