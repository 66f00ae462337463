"""
把 head 标签声明转换为 HTML

    {"title": "Home"}
        -> <title>Home</title>

    {"meta": [{"name": "description", "content": "..."}]}
        -> <meta name="description" content="...">
"""

from __future__ import annotations

from typing import Any, Mapping


def _render_attributes(attributes: Mapping[str, Any]) -> str:
    parts = []
    for name, value in attributes.items():
        # 属性值中的双引号直接去掉，避免提前闭合属性
        text = "" if value is None else str(value).replace('"', "")
        parts.append(f'{name}="{text}"')
    return " ".join(parts)


def object_to_html_tags(tags: Any, indent: str = "") -> str:
    if not isinstance(tags, Mapping):
        return ""

    html = ""

    for tag_name, contents in tags.items():
        if isinstance(contents, str):
            html += f"{indent}<{tag_name}>{contents}</{tag_name}>\n"
        elif isinstance(contents, list):
            for attributes in contents:
                if isinstance(attributes, Mapping):
                    html += f"{indent}<{tag_name} {_render_attributes(attributes)}>\n"

    return html
