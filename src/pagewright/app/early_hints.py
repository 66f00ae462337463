"""
103 Early Hints

在最终响应写出之前推送预加载提示，同时把同样的内容写进普通的 Link 响应头，
不支持 Early Hints 的客户端也能拿到预加载信息。

调试: curl -X GET -I https://example.com
参考: https://datatracker.ietf.org/doc/html/rfc8297
"""

from __future__ import annotations

from pagewright.app.assets import ComponentsAssets
from pagewright.core.logger import logger
from pagewright.server.exchange import HttpResponse


class EarlyHintEmitter:
    async def emit(
        self,
        response: HttpResponse,
        version: str,
        assets: ComponentsAssets,
    ) -> list[str]:
        """
        发送预加载提示

        Returns:
            实际发送的 Link 值列表；没有可预加载的资源时为空，不发送任何内容
        """
        links = assets.preload_links(version)
        if not links:
            return []

        await response.write_early_hints(links)
        if response.is_ended():
            return links

        response.set_header("link", ", ".join(links))
        logger.debug("已发送 Early Hints: {} 条", len(links))
        return links
