"""
协作者接口与默认实现

使用方式:
    from pagewright.services import FileScriptRepository, StaticFileManager

    scripts = FileScriptRepository(config.scripts_dir, minify=not config.development)
    file_manager = StaticFileManager(version="20260101")
"""

from pagewright.services.collaborators import (
    ComponentProcessor,
    FileManager,
    LayoutRenderer,
    ScriptRepository,
)
from pagewright.services.file_manager import StaticFileManager
from pagewright.services.scripts import FileScriptRepository, minify_script

__all__ = [
    "ComponentProcessor",
    "FileManager",
    "LayoutRenderer",
    "ScriptRepository",
    "StaticFileManager",
    "FileScriptRepository",
    "minify_script",
]
