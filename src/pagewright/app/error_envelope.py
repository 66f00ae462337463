"""
错误信封构建

系统中所有失败（整页渲染异常、数据路径返回的错误、协议版本不一致）
都经由这里转换为同一种 JSON 结构：

    {"code": 400, "name": "...", "message": "...", "stack": ""}

状态码策略:
- is_throw=True -> 400，否则 200
- 只有当前状态码仍是默认的 200 时才会修改，之前步骤设置过的状态码（如 500）保持不变
- 状态码仍为 200 时（"软"错误）额外设置 x-response-type: error

堆栈只在开发模式下返回。
"""

from __future__ import annotations

from pagewright.config.constants import (
    DEFAULT_STATUS_CODE,
    RESPONSE_TYPE_HEADER,
    ResponseType,
)
from pagewright.core.error_utils import (
    extract_error_message,
    extract_error_name,
    format_error_stack,
)
from pagewright.core.logger import logger
from pagewright.models.envelope import ErrorEnvelope
from pagewright.server.exchange import HttpResponse
from pagewright.server.formatter import ResponseFormatter, ResponseKind


class ErrorEnvelopeBuilder:
    def __init__(self, formatter: ResponseFormatter) -> None:
        self.formatter = formatter

    def build(
        self,
        response: HttpResponse,
        error: BaseException,
        is_throw: bool,
        development: bool,
    ) -> ErrorEnvelope:
        """设置状态码与响应头，返回待写出的错误信封"""
        if response.status_code == DEFAULT_STATUS_CODE:
            response.status_code = 400 if is_throw else 200

        self.formatter.set_headers(response, ResponseKind.JSON)

        if response.status_code == DEFAULT_STATUS_CODE:
            response.set_header(RESPONSE_TYPE_HEADER, ResponseType.ERROR)

        return ErrorEnvelope(
            code=response.status_code,
            name=extract_error_name(error),
            message=extract_error_message(error),
            stack=format_error_stack(error) if development else "",
        )

    async def respond(
        self,
        response: HttpResponse,
        error: BaseException,
        is_throw: bool,
        development: bool,
    ) -> None:
        if response.is_ended():
            logger.debug("响应已结束，跳过错误响应: {}", extract_error_name(error))
            return

        envelope = self.build(response, error, is_throw, development)
        await response.end(envelope.model_dump_json())
