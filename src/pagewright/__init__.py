"""
pagewright - 服务端渲染框架的请求分发与响应合成层

公开接口:
- AppComponents: 请求分发器
- create_app: 构建 ASGI 应用
- ComponentAsset / ComponentsAssets / ChunkParams / ProcessResult: 渲染协作者使用的数据结构
"""

__version__ = "0.1.0"

from pagewright.app import (
    AppComponents,
    ChunkParams,
    ComponentAsset,
    ComponentsAssets,
    ProcessResult,
)
from pagewright.config import Config, config
from pagewright.server.asgi import create_app

__all__ = [
    "AppComponents",
    "ChunkParams",
    "ComponentAsset",
    "ComponentsAssets",
    "Config",
    "ProcessResult",
    "config",
    "create_app",
]
