"""
分发层异常定义

所有异常都可以交给 ErrorEnvelopeBuilder 转换为统一的 JSON 错误信封。
is_throw=True 的异常在数据路径上返回 400，否则作为"软错误"以 200 返回。
"""

from __future__ import annotations


class PagewrightException(Exception):
    """分发层异常基类"""

    is_throw: bool = False

    def __init__(self, message: str = "", *, is_throw: bool | None = None) -> None:
        super().__init__(message)
        self.message = message
        if is_throw is not None:
            self.is_throw = is_throw


class WrongAjaxVersionError(PagewrightException):
    """客户端上报的 x-ajax-version 与服务端不一致"""

    is_throw = True

    def __init__(self, message: str, *, client_version: str, server_version: str) -> None:
        super().__init__(message)
        self.client_version = client_version
        self.server_version = server_version


class InternalServerError(PagewrightException):
    """生产环境下替代真实异常返回给客户端，不暴露内部细节"""

    is_throw = True

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message)


class RequestParametersError(PagewrightException):
    """请求体无法解析"""

    is_throw = True


class ScriptNotFoundError(PagewrightException):
    """脚本仓库中不存在请求的引导脚本"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Script not found in repository: {name}")
        self.name = name


class ResponseAlreadyEndedError(PagewrightException):
    """响应已经结束后仍尝试写入"""

    def __init__(self, action: str) -> None:
        super().__init__(f"Cannot {action}: response has already ended")
        self.action = action
