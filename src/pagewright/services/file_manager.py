from __future__ import annotations

from pagewright.core.logger import logger
from pagewright.services.collaborators import FileManager


class StaticFileManager(FileManager):
    """版本号固定的文件管理器（版本号通常来自部署时的构建号）"""

    def __init__(self, version: str) -> None:
        self.version = version

    async def get_asset_version_token(self) -> str:
        return self.version

    async def ensure_component_is_rendered(self, component_name: str) -> None:
        logger.debug("静态文件管理器无需预渲染组件: {}", component_name)
