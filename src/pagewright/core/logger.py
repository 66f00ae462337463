"""
日志配置 - 基于 loguru

- 控制台级别由 LOG_LEVEL 控制（默认开发环境 DEBUG，容器内 INFO）
- 文件日志写入 LOG_DIR（默认 ./logs）：app.log 全量，error.log 仅 ERROR
- LOG_DISABLE_FILE=true 时不写文件（测试环境）

使用方式:
    from pagewright.core.logger import logger
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from loguru import logger

IS_DOCKER = (
    os.path.exists("/.dockerenv")
    or os.environ.get("DOCKER_CONTAINER", "false").lower() == "true"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if not IS_DOCKER else "INFO").upper()
DISABLE_FILE_LOG = os.getenv("LOG_DISABLE_FILE", "false").lower() == "true"
LOG_DIR = Path(os.getenv("LOG_DIR", str(Path.cwd() / "logs")))

CONSOLE_FORMAT_DEV = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>"
CONSOLE_FORMAT_PROD = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"

logger.remove()

# 容器内不输出 diagnose，避免把请求数据写进日志
logger.add(
    sys.stdout,
    format=CONSOLE_FORMAT_PROD if IS_DOCKER else CONSOLE_FORMAT_DEV,
    level=LOG_LEVEL,
    colorize=not IS_DOCKER,
    backtrace=not IS_DOCKER,
    diagnose=not IS_DOCKER,
)

if not DISABLE_FILE_LOG:
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    file_log_config = {
        "format": FILE_FORMAT,
        "retention": "30 days",
        "compression": "gz",
        "encoding": "utf-8",
        "backtrace": not IS_DOCKER,
        "diagnose": not IS_DOCKER,
    }
    logger.add(LOG_DIR / "app.log", level="DEBUG", rotation="100 MB", **file_log_config)  # type: ignore[call-overload]
    logger.add(LOG_DIR / "error.log", level="ERROR", rotation="50 MB", **file_log_config)  # type: ignore[call-overload]

logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

__all__ = ["logger"]
