"""
日志初始化

- 根日志记录器的等级取自参数或 LOG_LEVEL，格式统一为「时间 等级 [模块] 消息」；
- 第三方库单独控制：SQL 语句日志（sqlalchemy.engine）默认 WARNING，需要排查查询时
  设置 SQL_LOG_LEVEL=INFO；uvicorn 的访问日志跟随根等级。
"""

import logging
from typing import Optional

from . import config

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def _to_level(name: Optional[str], default: int) -> int:
    value = getattr(logging, name.upper(), None) if name else None
    return value if isinstance(value, int) else default


def setup_logging(level: Optional[str] = None, sql_level: Optional[str] = None) -> int:
    """初始化日志，返回最终生效的根等级"""
    root_level = _to_level(level or config.LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=root_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(root_level)

    logging.getLogger('sqlalchemy.engine').setLevel(
        _to_level(sql_level or config.SQL_LOG_LEVEL, logging.WARNING)
    )
    logging.getLogger('uvicorn.access').setLevel(root_level)
    return root_level
