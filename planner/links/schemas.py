"""
链接相关的请求和响应模式。
"""

from ..schemas import CamelModel


class LinkRequest(CamelModel):
    """创建链接的请求体"""
    title: str
    url: str


class LinkCreatedResponse(CamelModel):
    """创建链接的响应"""
    link_code: str


class Link(CamelModel):
    """链接响应模型"""
    trip_code: str
    code: str
    title: str
    url: str
