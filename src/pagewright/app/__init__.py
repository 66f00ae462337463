"""
请求分发与响应合成

使用方式:
    from pagewright.app import AppComponents, ComponentAsset

    components = AppComponents(config, layout=..., processor=..., file_manager=...)
    await components.parse_request(exchange, ["blog", "42"])
"""

from pagewright.app.assets import ComponentAsset, ComponentsAssets
from pagewright.app.components import AppComponents
from pagewright.app.context import ChunkParams, Negotiation, QueryParams, RequestClassification
from pagewright.app.negotiation import classify, classify_request
from pagewright.app.results import ProcessResult, ResultKind

__all__ = [
    "AppComponents",
    "ChunkParams",
    "ComponentAsset",
    "ComponentsAssets",
    "Negotiation",
    "ProcessResult",
    "QueryParams",
    "RequestClassification",
    "ResultKind",
    "classify",
    "classify_request",
]
