"""
外部协作者接口

分发层只依赖这些窄接口：路由解析、组件树渲染、资源版本管理、引导脚本读取
都由外部实现，通过构造函数注入 AppComponents。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pagewright.app.context import ChunkParams
    from pagewright.app.results import ProcessResult


class LayoutRenderer(ABC):
    """整页渲染（布局引擎）"""

    @abstractmethod
    async def make_layout_html(
        self, path_segments: list[str], chunk_params: ChunkParams
    ) -> str | None:
        """
        渲染整页 body 内容

        渲染过程中组件通过 chunk_params.components_assets 登记样式/脚本。

        Returns:
            body 标记；路径不存在时返回 None

        Raises:
            任意异常都视为服务端故障（500）
        """


class ComponentProcessor(ABC):
    """数据路径（XHR）上的组件处理"""

    @abstractmethod
    async def process(
        self, path_segments: list[str], chunk_params: ChunkParams
    ) -> ProcessResult | Any:
        """
        处理数据请求，不抛出异常：失败通过返回值（ProcessResult.error 或异常对象）表达
        """


class FileManager(ABC):
    """静态资源版本管理"""

    @abstractmethod
    async def get_asset_version_token(self) -> str:
        pass

    async def ensure_component_is_rendered(self, component_name: str) -> None:
        return None


class ScriptRepository(ABC):
    """引导脚本仓库"""

    @abstractmethod
    async def get_script(self, name: str) -> str:
        pass
