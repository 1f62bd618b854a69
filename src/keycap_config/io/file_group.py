"""
同一份按键映射在不同扩展名下的文件组
  .kfg  — 二进制版本化格式
  .json — 可读 JSON 格式
"""

import os
from enum import Enum
from typing import Optional


class ValidExtension(str, Enum):
    JSON = ".json"
    KFG = ".kfg"

    @classmethod
    def from_path(cls, path: str) -> Optional["ValidExtension"]:
        """根据路径扩展名判断编码, 未知扩展名返回 None"""
        ext = os.path.splitext(path)[1].lower()
        for member in cls:
            if member.value == ext:
                return member
        return None


class FileGroup:
    """一个基础文件名, 按需派生 .kfg / .json 文件名 (纯命名工具, 不做 I/O)"""

    def __init__(self, file_name: str):
        self.file_name = file_name
        self.extension = os.path.splitext(file_name)[1]

    def get_filename_with_extension(self, extension: str) -> str:
        """替换 (或追加) 扩展名; 仅大小写不同时保留原文件名"""
        if isinstance(extension, ValidExtension):
            extension = extension.value
        if not extension.startswith("."):
            extension = "." + extension
        base, current = os.path.splitext(self.file_name)
        if current.lower() == extension.lower():
            return self.file_name
        return base + extension

    @staticmethod
    def dialog_filter(product_name: str) -> str:
        """文件对话框过滤器: JSON / Config / 全部文件"""
        return ";;".join([
            f"{product_name} Json files (*{ValidExtension.JSON.value})",
            f"{product_name} Config files (*{ValidExtension.KFG.value})",
            "All files (*)",
        ])

    def __str__(self) -> str:
        return self.file_name

    def __repr__(self) -> str:
        return f"FileGroup({self.file_name!r})"
