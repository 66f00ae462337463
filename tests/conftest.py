import os

# 测试环境不写日志文件
os.environ.setdefault("LOG_DISABLE_FILE", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from pagewright.app.components import AppComponents
from pagewright.config.settings import Config
from pagewright.server.exchange import EARLY_HINT_EXTENSION, HttpExchange


class RecordingSend:
    """记录所有 ASGI 消息的 send"""

    def __init__(self) -> None:
        self.messages: list[dict[str, Any]] = []

    async def __call__(self, message: dict[str, Any]) -> None:
        self.messages.append(message)

    def _of_type(self, message_type: str) -> list[dict[str, Any]]:
        return [m for m in self.messages if m["type"] == message_type]

    @property
    def starts(self) -> list[dict[str, Any]]:
        return self._of_type("http.response.start")

    @property
    def status(self) -> int:
        return self.starts[0]["status"]

    @property
    def headers(self) -> dict[str, str]:
        return {k.decode(): v.decode() for k, v in self.starts[0]["headers"]}

    @property
    def body(self) -> str:
        return b"".join(m["body"] for m in self._of_type("http.response.body")).decode()

    def json(self) -> Any:
        return json.loads(self.body)

    @property
    def early_hints(self) -> list[list[str]]:
        return [[link.decode() for link in m["links"]] for m in self._of_type(EARLY_HINT_EXTENSION)]


def build_scope(
    method: str = "GET",
    path: str = "/",
    headers: dict[str, str] | None = None,
    query_string: str = "",
    early_hints: bool = False,
) -> dict[str, Any]:
    raw_headers = {"host": "example.com"}
    raw_headers.update({k.lower(): v for k, v in (headers or {}).items()})
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "2",
        "method": method,
        "scheme": "https",
        "path": path,
        "raw_path": path.encode(),
        "query_string": query_string.encode(),
        "root_path": "",
        "headers": [(k.encode(), v.encode()) for k, v in raw_headers.items()],
        "server": ("example.com", 443),
        "client": ("127.0.0.1", 50000),
        "extensions": {EARLY_HINT_EXTENSION: {}} if early_hints else {},
    }


def make_receive(body: bytes = b""):
    sent = False

    async def receive() -> dict[str, Any]:
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return receive


@pytest.fixture
def make_exchange():
    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        body: bytes = b"",
        query_string: str = "",
        early_hints: bool = False,
    ) -> tuple[HttpExchange, RecordingSend]:
        send = RecordingSend()
        scope = build_scope(method, path, headers, query_string, early_hints)
        return HttpExchange.from_asgi(scope, make_receive(body), send), send

    return _make




@pytest.fixture
def make_components():
    def _make(
        *,
        layout: Any = None,
        processor: Any = None,
        file_manager: Any = None,
        scripts: Any = None,
        **config_overrides: Any,
    ) -> AppComponents:
        return AppComponents(
            Config(**config_overrides),
            layout=layout or SimpleNamespace(make_layout_html=AsyncMock(return_value="<main></main>")),
            processor=processor or SimpleNamespace(process=AsyncMock(return_value={})),
            file_manager=file_manager
            or SimpleNamespace(
                get_asset_version_token=AsyncMock(return_value="v1"),
                ensure_component_is_rendered=AsyncMock(),
            ),
            scripts=scripts
            or SimpleNamespace(get_script=AsyncMock(side_effect=lambda name: f"// {name}")),
        )

    return _make
