"""
页面语言协商

根据 Accept-Language（含 q 权重）在支持的语言列表中选择页面语言。
"""

from __future__ import annotations

from starlette.requests import Request


def parse_accept_language(header: str) -> list[str]:
    """按 q 权重从高到低返回语言标签（小写），q=0 的条目被丢弃"""
    weighted: list[tuple[float, int, str]] = []

    for index, part in enumerate(header.split(",")):
        pieces = [piece.strip() for piece in part.split(";")]
        tag = pieces[0].lower()
        if not tag:
            continue

        quality = 1.0
        for param in pieces[1:]:
            if param.startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0

        if quality > 0:
            # 同权重保持原始顺序
            weighted.append((-quality, index, tag))

    return [tag for _, _, tag in sorted(weighted)]


def resolve_locale(
    request: Request,
    supported_locales: list[str],
    default_locale: str | None = None,
) -> str | None:
    """
    选择页面语言

    精确匹配优先，其次按主语言匹配（"de-AT" 命中 "de"）。
    没有配置支持的语言或没有匹配项时返回 default_locale。
    """
    if not supported_locales:
        return default_locale

    supported = {locale.lower(): locale for locale in supported_locales}
    requested = parse_accept_language(request.headers.get("accept-language", ""))

    for tag in requested:
        if tag in supported:
            return supported[tag]
        primary = tag.split("-")[0]
        if primary in supported:
            return supported[primary]

    return default_locale
