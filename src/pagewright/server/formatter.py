"""
响应格式化

根据响应类别设置 Content-Type 与 Cache-Control。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from pagewright.server.exchange import HttpResponse


class ResponseKind(str, Enum):
    """分发层输出的响应类别"""

    HTML = "html"
    TXT = "txt"
    JSON = "json"


DEFAULT_MIME_TYPES: dict[str, str] = {
    "html": "text/html; charset=utf-8",
    "txt": "text/plain; charset=utf-8",
    "json": "application/json; charset=utf-8",
    "js": "text/javascript; charset=utf-8",
    "css": "text/css; charset=utf-8",
}

# 动态内容，永远不缓存
_DYNAMIC_KINDS = {ResponseKind.HTML.value, ResponseKind.TXT.value, ResponseKind.JSON.value}


class ResponseFormatter(ABC):
    """响应头格式化器接口"""

    @abstractmethod
    def set_headers(self, response: HttpResponse, kind: ResponseKind | str) -> None:
        pass


class ServerResponseFormatter(ResponseFormatter):
    """默认实现：kind -> MIME 映射 + 缓存策略"""

    def __init__(self, max_age: int = 0, mime_types: dict[str, str] | None = None) -> None:
        self.max_age = max_age
        self.mime_types = {**DEFAULT_MIME_TYPES, **(mime_types or {})}

    def set_headers(self, response: HttpResponse, kind: ResponseKind | str) -> None:
        kind_value = kind.value if isinstance(kind, ResponseKind) else str(kind)

        mime_type = self.mime_types.get(kind_value, "application/octet-stream")
        response.set_header("content-type", mime_type)

        if kind_value in _DYNAMIC_KINDS or self.max_age <= 0:
            response.set_header("cache-control", "no-store")
        else:
            response.set_header("cache-control", f"public, max-age={self.max_age}")
