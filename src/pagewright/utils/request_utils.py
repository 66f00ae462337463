"""
请求处理工具函数
提供统一的HTTP请求信号提取与参数解析功能
"""

from __future__ import annotations

import json
from typing import Any

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

from pagewright.config.constants import XHR_HEADER, XHR_HEADER_VALUE
from pagewright.core.exceptions import RequestParametersError

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_header_as_string(request: Request, name: str) -> str | None:
    """
    获取请求头的第一个值

    Returns:
        请求头的值，不存在时返回 None
    """
    value = request.headers.get(name)
    if value is None:
        return None
    return value.strip()


def is_request_xhr(request: Request) -> bool:
    """X-Requested-With: XMLHttpRequest 标记的请求视为 XHR"""
    value = get_header_as_string(request, XHR_HEADER) or ""
    return value.lower() == XHR_HEADER_VALUE


def is_request_html(request: Request) -> bool:
    """Accept 头中声明接受 text/html 的请求视为页面请求"""
    accept = request.headers.get("accept", "")
    media_types = [part.split(";")[0].strip().lower() for part in accept.split(",")]
    return "text/html" in media_types


def explode_pathname(path: str) -> list[str]:
    """把 URL 路径拆成非空的路径段: "/a/b/" -> ["a", "b"]"""
    return [segment for segment in path.split("/") if segment]


def _content_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def get_post_request_parameters(request: Request) -> dict[str, Any]:
    """
    解析请求体参数

    - GET/HEAD 请求没有请求体，返回空字典
    - application/json: 解析为对象（非对象的 JSON 值包裹为 {"": value}）
    - 表单: 重复的键合并为列表，上传文件以文件名表示

    Raises:
        RequestParametersError: JSON 或表单请求体格式错误
    """
    if request.method in ("GET", "HEAD"):
        return {}

    content_type = _content_type(request)

    if content_type == "application/json":
        body = await request.body()
        if not body.strip():
            return {}
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RequestParametersError(f"Malformed JSON body: {exc}") from exc
        return data if isinstance(data, dict) else {"": data}

    if content_type in _FORM_CONTENT_TYPES:
        params: dict[str, Any] = {}
        try:
            async with request.form() as form:
                for key, value in form.multi_items():
                    if isinstance(value, UploadFile):
                        value = value.filename or ""
                    if key not in params:
                        params[key] = value
                    elif isinstance(params[key], list):
                        params[key].append(value)
                    else:
                        params[key] = [params[key], value]
        # 挂载在 Starlette 应用下时，multipart 错误会被包装成 HTTPException(400)
        except (MultiPartException, HTTPException, ValueError) as exc:
            raise RequestParametersError(f"Malformed form body: {exc}") from exc
        return params

    return {}


def get_query_string_parameters(request: Request) -> dict[str, str]:
    """查询字符串参数，重复的键以最后一个值为准"""
    return dict(request.query_params)
