"""
HTML 文档组装

把渲染好的 body 内容、聚合后的样式/脚本标签、head 标签以及内联引导脚本
拼成完整的 HTML 文档。
"""

from __future__ import annotations

from typing import Any, Sequence

from pagewright.config.constants import DEFAULT_LOCALE
from pagewright.utils.html_tags import object_to_html_tags


def build_base_href(host: str, version: str) -> str:
    return f"//{host}/{version}/"


def build_document(
    *,
    content: str,
    base_href: str,
    locale: str | None = None,
    head_tags: Any = None,
    styles: str = "",
    scripts: str = "",
    bootstrap_scripts: Sequence[str] = (),
) -> str:
    """
    组装完整文档

    Args:
        content: 渲染器输出的 body 内容
        base_href: <base> 的 href，见 build_base_href
        locale: 页面语言，缺省为 en
        head_tags: head 标签声明（object_to_html_tags 的输入）
        styles: 去重后的样式标签
        scripts: 去重后的脚本标签
        bootstrap_scripts: 按顺序内联到 <head> 的脚本内容
    """
    inline_scripts = "".join(
        f"  <script>\n{body}\n  </script>\n" for body in bootstrap_scripts
    )

    return (
        f'<!DOCTYPE html>\n<html lang="{locale or DEFAULT_LOCALE}">\n'
        "<head>\n"
        f'  <base href="{base_href}">\n'
        '  <meta charset="utf-8">\n'
        f"{object_to_html_tags(head_tags, '  ')}"
        f"{styles}\n"
        f"{inline_scripts}"
        "</head>\n<body>"
        f"{content}\n"
        f"{scripts}\n"
        "</body>\n</html>"
    )
