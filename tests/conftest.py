"""
pytest配置文件，定义测试环境和共享的测试夹具（fixtures）。

主要功能：
1. 配置测试数据库连接（内存 SQLite，每个测试重新建表）
2. 提供数据库会话管理
3. 提供FastAPI测试客户端
4. 拦截邮件通知，记录发送请求而不真正连接 SMTP
5. 提供测试数据样本

注意：环境变量必须在导入 planner 之前设置，planner.config 在导入时读取它们。
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["NOTIFY_ENABLED"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from planner.main import app
from planner.utils import get_db, load_models
from planner.db_base import Base
from planner.services.notification_service import notification_service

load_models()

# StaticPool + check_same_thread=False：TestClient 在线程池中执行同步路由，需要共用同一个内存库连接
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def test_engine():
    """每个测试前建表，测试后删表"""
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(test_engine):
    """提供数据库会话"""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """提供FastAPI测试客户端"""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def sent_emails(monkeypatch):
    """记录后台任务发出的邮件通知：[(类型, 邮箱, TripNotice), ...]"""
    sent = []

    def fake_trip_created(email, trip):
        sent.append(("trip_created", email, trip))
        return True

    def fake_invitation(email, trip):
        sent.append(("invitation", email, trip))
        return True

    monkeypatch.setattr(notification_service, "send_trip_created", fake_trip_created)
    monkeypatch.setattr(notification_service, "send_invitation", fake_invitation)
    return sent


@pytest.fixture
def sample_trip_data():
    """提供测试用的行程数据样本"""
    return {
        "destination": "Florianópolis, Brasil",
        "startsAt": "2024-03-01T00:00:00-03:00",
        "endsAt": "2024-03-03T00:00:00-03:00",
        "ownerName": "Maria Souza",
        "ownerEmail": "maria@example.com",
        "emailsToInvite": ["joao@example.com", "ana@example.com"],
    }


@pytest.fixture
def trip_code(client, sample_trip_data):
    """创建一个行程并返回其编码"""
    response = client.post("/trips", json=sample_trip_data)
    return response.json()["tripCode"]
