"""
ASGI 应用入口

FastAPI 负责健康检查等内部路由，其余所有 HTTP 请求交给挂载在 / 的
DispatchApp，由 AppComponents 直接通过 ASGI send 写出响应（包括 103 Early Hints）。
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from pagewright.app.components import AppComponents
from pagewright.core.logger import logger
from pagewright.server.exchange import HttpExchange
from pagewright.utils.request_utils import explode_pathname


class DispatchApp:
    """原始 ASGI 应用：把 HTTP 请求交给 AppComponents"""

    def __init__(self, components: AppComponents) -> None:
        self.components = components

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] == "websocket":
            logger.debug("不支持的 WebSocket 连接: {}", scope.get("path"))
            await send({"type": "websocket.close", "code": 1003})
            return
        if scope["type"] != "http":
            return

        exchange = HttpExchange.from_asgi(scope, receive, send)
        await self.components.parse_request(exchange, explode_pathname(scope["path"]))


def create_app(components: AppComponents) -> FastAPI:
    app = FastAPI(title="pagewright", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/_health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.mount("/", DispatchApp(components))
    return app
