"""
行程规划API主应用文件。

本文件是FastAPI应用的入口点，负责：
1. 创建FastAPI应用实例
2. 注册各个模块的路由
3. 启动时按配置自动建表
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from .logging_config import setup_logging
from .config import LOG_LEVEL, DB_AUTO_CREATE
from .utils import init_db

from .trips.router import router as trips_router
from .participants.router import router as participants_router
from .activities.router import router as activities_router
from .links.router import router as links_router

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DB_AUTO_CREATE:
        init_db()
    logger.info("Trip planner API ready")
    yield


app = FastAPI(title="行程规划 API", lifespan=lifespan)

# 路由注册
app.include_router(trips_router)
app.include_router(participants_router)
app.include_router(activities_router)
app.include_router(links_router)


@app.get("/health", tags=["系统"])
def health() -> dict[str, str]:
    return {"status": "ok"}
