"""
公共的 Pydantic 基础模型。

对外 JSON 一律使用 camelCase 字段名（tripCode、startsAt 等），
Python 侧仍使用 snake_case 属性；请求体两种写法都接受。
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 序列化的基础模型"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,  # 允许从ORM对象创建
    )


class MessageResponse(CamelModel):
    """通用的消息响应"""
    message: str
