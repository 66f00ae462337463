"""
错误消息处理工具函数
"""

import traceback

_TRACEBACK_PREFIX = "Traceback (most recent call last):\n"


def extract_error_name(error: BaseException) -> str:
    return type(error).__name__


def extract_error_message(error: BaseException) -> str:
    """
    提取客户端可见的错误消息

    优先使用 message 属性（PagewrightException 已经处理过的消息），
    回退到异常的字符串表示。
    """
    message = getattr(error, "message", None)
    if message and isinstance(message, str) and message.strip():
        return message

    return str(error)


def format_error_stack(error: BaseException) -> str:
    """
    格式化异常堆栈，去掉开头通用的 "Traceback (most recent call last):" 前缀

    未被抛出过的异常（例如由处理器直接返回的异常对象）没有 __traceback__，
    此时只包含 "ExceptionName: message" 这一行。
    """
    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    if stack.startswith(_TRACEBACK_PREFIX):
        stack = stack[len(_TRACEBACK_PREFIX) :]
    return stack.rstrip("\n")


def is_throw_error(error: BaseException) -> bool:
    return bool(getattr(error, "is_throw", False))
