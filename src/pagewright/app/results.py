"""
数据路径处理结果

ComponentProcessor 返回 ProcessResult（或原始值，由 from_value 统一转换），
分发器只按 kind 分支，不再做运行时类型判断。
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic_core import to_jsonable_python

from pagewright.core.error_utils import is_throw_error


class ResultKind(str, Enum):
    ERROR = "error"
    STRING = "string"
    JSON = "json"


@dataclass(frozen=True)
class ProcessResult:
    kind: ResultKind
    value: Any = None
    is_throw: bool = False

    @classmethod
    def error(cls, error: BaseException, is_throw: bool | None = None) -> "ProcessResult":
        if is_throw is None:
            is_throw = is_throw_error(error)
        return cls(kind=ResultKind.ERROR, value=error, is_throw=is_throw)

    @classmethod
    def string(cls, text: str) -> "ProcessResult":
        # str 子类（"装箱"字符串）统一转为普通 str
        return cls(kind=ResultKind.STRING, value=str(text))

    @classmethod
    def json(cls, value: Any) -> "ProcessResult":
        return cls(kind=ResultKind.JSON, value=value)

    @classmethod
    def from_value(cls, value: Any) -> "ProcessResult":
        if isinstance(value, ProcessResult):
            return value
        if isinstance(value, BaseException):
            return cls.error(value)
        if isinstance(value, str):
            return cls.string(value)
        return cls.json(value)

    def to_json(self) -> str:
        """紧凑 JSON，支持 pydantic 模型 / dataclass / datetime"""
        return json.dumps(
            self.value,
            separators=(",", ":"),
            ensure_ascii=False,
            default=to_jsonable_python,
        )
