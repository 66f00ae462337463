"""
错误信封模型 - 系统唯一的错误响应结构
"""

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    """统一错误响应"""

    code: int = Field(..., description="HTTP 状态码")
    name: str = Field(..., description="异常类名")
    message: str = Field(..., description="错误消息")
    stack: str = Field("", description="异常堆栈，仅开发模式下非空")
