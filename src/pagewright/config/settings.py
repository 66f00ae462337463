"""
应用配置

所有配置项都从环境变量读取（前缀 PAGEWRIGHT_），在进程启动时加载一次。
测试或嵌入场景可以直接构造 Config(...) 覆盖任意字段。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from pagewright.config.constants import DEFAULT_WRONG_VERSION_MESSAGE

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_SCRIPTS_DIR = PACKAGE_ROOT / "public_scripts"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Config:
    """分发层配置"""

    # 开发模式：错误响应中携带堆栈，引导脚本不压缩
    development: bool = False

    # XHR 协议版本，客户端通过 x-ajax-version 上报
    ajax_version: str = "1"
    ajax_wrong_version_message: str = DEFAULT_WRONG_VERSION_MESSAGE

    # 传输层支持时是否发送 103 Early Hints
    early_hints: bool = True

    # 静态类资源的缓存时间（秒），0 表示不缓存
    max_age: int = 0
    # 覆盖默认的 kind -> MIME 映射
    mime_types: dict[str, str] = field(default_factory=dict)

    scripts_dir: Path = DEFAULT_SCRIPTS_DIR

    # 页面语言协商
    supported_locales: list[str] = field(default_factory=list)
    default_locale: str | None = None

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            development=_env_bool("PAGEWRIGHT_DEVELOPMENT", False),
            ajax_version=os.getenv("PAGEWRIGHT_AJAX_VERSION", "1"),
            ajax_wrong_version_message=os.getenv(
                "PAGEWRIGHT_AJAX_WRONG_VERSION_MESSAGE", DEFAULT_WRONG_VERSION_MESSAGE
            ),
            early_hints=_env_bool("PAGEWRIGHT_EARLY_HINTS", True),
            max_age=int(os.getenv("PAGEWRIGHT_MAX_AGE", "0")),
            scripts_dir=Path(os.getenv("PAGEWRIGHT_SCRIPTS_DIR", str(DEFAULT_SCRIPTS_DIR))),
            supported_locales=_env_list("PAGEWRIGHT_LOCALES"),
            default_locale=os.getenv("PAGEWRIGHT_DEFAULT_LOCALE") or None,
        )


config = Config.from_env()
