"""
本文件包含数据库连接和会话管理的工具函数。

主要功能：
1. 数据库连接配置（从环境变量读取，避免硬编码）
2. 数据库会话管理
3. FastAPI依赖注入
4. 建表（init_db）
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .config import get_database_url
from .db_base import Base

logger = logging.getLogger(__name__)

DATABASE_URL = get_database_url()

engine = create_engine(DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI 依赖项：获取数据库会话（Session）。"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def load_models() -> None:
    """导入所有模型，确保它们注册到 Base.metadata，且关系映射能互相解析"""
    from .trips import models as _trip_models  # noqa: F401
    from .participants import models as _participant_models  # noqa: F401
    from .activities import models as _activity_models  # noqa: F401
    from .links import models as _link_models  # noqa: F401


def init_db(bind=None) -> None:
    """根据已注册的 ORM 模型创建所有表（已存在的表会跳过）。"""
    load_models()
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("[db][init] tables=%s", sorted(Base.metadata.tables))
