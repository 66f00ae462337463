"""
基于目录的引导脚本仓库

脚本按名称从目录中读取一次并缓存；生产模式下做简单压缩
（去掉空行和整行 // 注释）。
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pagewright.core.exceptions import ScriptNotFoundError
from pagewright.core.logger import logger
from pagewright.services.collaborators import ScriptRepository


def minify_script(body: str) -> str:
    lines = []
    for line in body.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("//"):
            continue
        lines.append(stripped)
    return "\n".join(lines)


class FileScriptRepository(ScriptRepository):
    def __init__(self, directory: str | Path, minify: bool = False) -> None:
        self._directory = Path(directory)
        self._minify = minify
        self._cache: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get_script(self, name: str) -> str:
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        async with self._lock:
            # 等锁期间可能已被其他请求加载
            if name in self._cache:
                return self._cache[name]

            # 只接受目录下的纯文件名
            path = self._directory / name
            if Path(name).name != name or not path.is_file():
                raise ScriptNotFoundError(name)

            body = await asyncio.to_thread(path.read_text, encoding="utf-8")
            if self._minify:
                body = minify_script(body)

            self._cache[name] = body
            logger.debug("引导脚本已加载: {} ({} 字节)", name, len(body))
            return body
