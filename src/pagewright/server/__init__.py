"""
HTTP 传输层

- HttpExchange / HttpResponse: 请求与单写者响应
- ResponseFormatter: 按响应类别设置响应头
"""

from pagewright.server.exchange import HttpExchange, HttpResponse
from pagewright.server.formatter import ResponseFormatter, ResponseKind, ServerResponseFormatter

__all__ = [
    "HttpExchange",
    "HttpResponse",
    "ResponseFormatter",
    "ResponseKind",
    "ServerResponseFormatter",
]
