"""
文件路径：name_overlay/components/io.py

说明：文件与路径相关的能力，从包入口拆分而来。
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from ..variables import (
    PATH_LOGS_DIR,
    PATH_OUTPUT_DIR,
    PATH_TEMP_DIR,
    CONST_OUTPUT_NAME_TEMPLATE,
    CONST_FILENAME_FORBIDDEN_CHARS,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
)
from .logging import retry_on_exception


def sanitize_filename_part(text: str, replacement: str = "_") -> str:
    """替换文件名中不允许出现的字符（含控制字符）。"""
    out = []
    for ch in text:
        if ch in CONST_FILENAME_FORBIDDEN_CHARS or ord(ch) < 32:
            out.append(replacement)
        else:
            out.append(ch)
    return "".join(out)


def gift_filename(name: str) -> str:
    """根据名字生成下载文件名，例如 "小明" -> "給小明的禮物.pdf"。"""
    return CONST_OUTPUT_NAME_TEMPLATE.format(name=sanitize_filename_part(name))


@retry_on_exception()
def _read_bytes_with_retry(path: Path) -> bytes:
    return path.read_bytes()


class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def ensure_project_dirs() -> None:
        """确保项目运行所需目录存在：logs/output/temp。"""
        for d in (PATH_LOGS_DIR, PATH_OUTPUT_DIR, PATH_TEMP_DIR):
            d.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"[{ERR_FILE_NOT_FOUND}] 文件不存在或不可读: {path}")

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("probe")
        except OSError as exc:
            raise PermissionError(f"[{ERR_PATH_NOT_WRITABLE}] 目录不可写: {parent}") from exc
        else:
            probe.unlink(missing_ok=True)

    @staticmethod
    def read_bytes(path: Path) -> bytes:
        """读取整个文件为字节串；不存在时直接抛出，短暂的 IO 错误会重试。"""
        FileHandler.validate_readable_file(path)
        return _read_bytes_with_retry(Path(path))

    @staticmethod
    def write_bytes(target: Path, data: bytes) -> Path:
        FileHandler.ensure_parent_writable(target)
        with open(target, "wb") as f:  # noqa: P103
            f.write(data)
        return target

    @staticmethod
    def output_path_for_name(name: str, output_dir: Optional[Path] = None) -> Path:
        """生成名字对应的输出路径，位于 output 目录（或自定义目录）。

        示例：
            >>> FileHandler.output_path_for_name("小明")
            Path("output/給小明的禮物.pdf")
        """
        target_dir = output_dir if output_dir is not None else PATH_OUTPUT_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        return target_dir / gift_filename(name)


__all__ = ["FileHandler", "gift_filename", "sanitize_filename_part"]
