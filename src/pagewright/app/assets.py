"""
组件资源聚合

渲染过程中每个组件把自己的样式/脚本登记到 ComponentsAssets：
- 键是组件/资源标识，值是 ComponentAsset
- 输出时按标签内容去重（不是按键），保持首次出现的顺序
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote


@dataclass
class ComponentAsset:
    """一个样式或脚本标签，url 用于 Early Hints 预加载"""

    tag: str
    url: str | None = None


# Link 头只能是 latin-1，URL 中其余字符做百分号编码；已编码的 %XX 保持不变
_URL_SAFE_CHARS = "/:@!$&'()*+,;=-._~%"


def _link_url(version: str, url: str) -> str:
    return quote(f"/{version}/{url}", safe=_URL_SAFE_CHARS)


def _stringify(assets: dict[str, ComponentAsset]) -> str:
    # dict.fromkeys 作为保持插入顺序的集合
    tags = dict.fromkeys(asset.tag for asset in assets.values())
    return "".join(tags)


@dataclass
class ComponentsAssets:
    styles: dict[str, ComponentAsset] = field(default_factory=dict)
    scripts: dict[str, ComponentAsset] = field(default_factory=dict)

    def add_style(self, key: str, asset: ComponentAsset) -> None:
        self.styles[key] = asset

    def add_script(self, key: str, asset: ComponentAsset) -> None:
        self.scripts[key] = asset

    def stringify(self) -> tuple[str, str]:
        """返回 (styles, scripts) 两段拼接好的标签"""
        return _stringify(self.styles), _stringify(self.scripts)

    def preload_links(self, version: str) -> list[str]:
        """
        构建 Link 头的值列表

        样式使用 rel="preload"; as="style"，脚本使用 rel="modulepreload"; as="script"，
        按完整的头值去重。没有 url 的资源不参与预加载。
        """
        links: dict[str, None] = {}

        for asset in self.styles.values():
            if asset.url:
                links.setdefault(f'<{_link_url(version, asset.url)}>; rel="preload"; as="style"', None)

        for asset in self.scripts.values():
            if asset.url:
                links.setdefault(f'<{_link_url(version, asset.url)}>; rel="modulepreload"; as="script"', None)

        return list(links)
