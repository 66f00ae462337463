"""
请求上下文数据结构

ChunkParams 在分发入口创建，只服务于一个请求；渲染期间唯一允许的修改是
向 components_assets 追加资源（以及填充 html_head_tags）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pagewright.app.assets import ComponentsAssets
from pagewright.server.exchange import HttpExchange


class Negotiation(str, Enum):
    """协商结果：整页 HTML 或数据片段"""

    HTML = "html"
    XHR = "xhr"


@dataclass(frozen=True)
class RequestClassification:
    is_xhr: bool
    is_html: bool

    @property
    def mode(self) -> Negotiation:
        return Negotiation.HTML if self.is_html else Negotiation.XHR


@dataclass(frozen=True)
class QueryParams:
    """请求体参数（query）与查询字符串参数（query_get），每个请求只解析一次"""

    query: dict[str, Any] = field(default_factory=dict)
    query_get: dict[str, Any] = field(default_factory=dict)


@dataclass
class ChunkParams:
    exchange: HttpExchange
    is_xhr: bool
    is_html: bool
    query_params: QueryParams
    components_assets: ComponentsAssets = field(default_factory=ComponentsAssets)
    # head 标签声明，由渲染器填充，见 utils.html_tags.object_to_html_tags
    html_head_tags: dict[str, Any] = field(default_factory=dict)
