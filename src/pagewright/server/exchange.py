"""
HTTP 交换对象

HttpExchange 把一次请求与它的响应句柄绑定在一起。HttpResponse 是 ASGI send 的
单写者封装：在 end() 之前状态码和响应头都可以修改，end() 之后任何写操作都会
抛出 ResponseAlreadyEndedError。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable

from starlette.requests import Request

from pagewright.config.constants import DEFAULT_STATUS_CODE
from pagewright.core.exceptions import ResponseAlreadyEndedError

Send = Callable[[dict[str, Any]], Awaitable[None]]

EARLY_HINT_EXTENSION = "http.response.early_hint"


class HttpResponse:
    """基于 ASGI send 的可变响应"""

    def __init__(self, send: Send, scope: dict[str, Any] | None = None) -> None:
        self._send = send
        self._headers: dict[str, str] = {}
        self._ended = False
        self.status_code = DEFAULT_STATUS_CODE
        extensions = (scope or {}).get("extensions") or {}
        self._early_hints = EARLY_HINT_EXTENSION in extensions

    @property
    def supports_early_hints(self) -> bool:
        return self._early_hints

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def is_ended(self) -> bool:
        return self._ended

    def set_header(self, name: str, value: str) -> None:
        if self._ended:
            raise ResponseAlreadyEndedError("set header")
        self._headers[name.lower()] = value

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name.lower())

    async def write_early_hints(self, links: Iterable[str]) -> None:
        """发送 103 Early Hints（仅当服务器声明支持 http.response.early_hint 扩展）"""
        if self._ended:
            raise ResponseAlreadyEndedError("write early hints")
        if not self._early_hints:
            return
        await self._send(
            {
                "type": EARLY_HINT_EXTENSION,
                "links": [link.encode("latin-1") for link in links],
            }
        )

    async def end(self, body: str | bytes = b"") -> None:
        if self._ended:
            raise ResponseAlreadyEndedError("end response")
        # 先标记结束，保证并发分支看到的一定是已结束状态
        self._ended = True

        payload = body.encode("utf-8") if isinstance(body, str) else body
        headers = [
            (name.encode("latin-1"), value.encode("latin-1"))
            for name, value in self._headers.items()
        ]
        headers.append((b"content-length", str(len(payload)).encode("latin-1")))

        await self._send(
            {
                "type": "http.response.start",
                "status": self.status_code,
                "headers": headers,
            }
        )
        await self._send({"type": "http.response.body", "body": payload, "more_body": False})


@dataclass
class HttpExchange:
    """一次 HTTP 调用：入站请求 + 出站响应"""

    request: Request
    response: HttpResponse

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Any, send: Send) -> "HttpExchange":
        return cls(request=Request(scope, receive), response=HttpResponse(send, scope))
