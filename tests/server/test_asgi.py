from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest

from pagewright.server.asgi import create_app


@pytest.fixture
def client_for(make_components):
    def _client(**kwargs) -> httpx.AsyncClient:
        app = create_app(make_components(**kwargs))
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")

    return _client


@pytest.mark.asyncio
async def test_health_route_is_served_by_fastapi(client_for) -> None:
    async with client_for() as client:
        response = await client.get("/_health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_page_request_renders_document(client_for) -> None:
    layout = SimpleNamespace(make_layout_html=AsyncMock(return_value="<main>blog</main>"))

    async with client_for(layout=layout) as client:
        response = await client.get("/blog/42", headers={"accept": "text/html"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/html; charset=utf-8"
    assert response.text.startswith("<!DOCTYPE html>")
    assert '<base href="//testserver/v1/">' in response.text
    assert layout.make_layout_html.await_args.args[0] == ["blog", "42"]


@pytest.mark.asyncio
async def test_xhr_request_returns_json(client_for) -> None:
    processor = SimpleNamespace(process=AsyncMock(return_value={"a": 1}))

    async with client_for(processor=processor) as client:
        response = await client.post("/api/items", json={"name": "x"})

    assert response.status_code == 200
    assert response.headers["x-response-type"] == "json"
    assert response.text == '{"a":1}'

    chunk_params = processor.process.await_args.args[1]
    assert chunk_params.query_params.query == {"name": "x"}
    assert chunk_params.is_xhr is True


@pytest.mark.asyncio
async def test_unknown_page_is_404(client_for) -> None:
    layout = SimpleNamespace(make_layout_html=AsyncMock(return_value=None))

    async with client_for(layout=layout) as client:
        response = await client.get("/missing", headers={"accept": "text/html"})

    assert response.status_code == 404
    assert response.text == "Page Not Found"


@pytest.mark.asyncio
async def test_malformed_multipart_is_answered(client_for) -> None:
    processor = SimpleNamespace(process=AsyncMock(return_value={}))

    async with client_for(processor=processor) as client:
        response = await client.post(
            "/upload",
            content=b"garbage",
            headers={"content-type": "multipart/form-data", "x-requested-with": "XMLHttpRequest"},
        )

    assert response.status_code == 400
    assert response.json()["name"] == "RequestParametersError"
    processor.process.assert_not_awaited()
