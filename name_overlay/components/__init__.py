"""
文件路径：name_overlay/components/__init__.py

说明：
- 组件包入口，聚合导出各子模块的通用能力；
- 业务模块与测试统一使用 `from name_overlay.components import ...` 导入。
"""

from __future__ import annotations

from .coords import (
    target_center_y,
    block_text_height,
    block_start_y,
    centered_x,
    to_top_left_y,
)
from .errors import (
    ErrorHandler,
    NameOverlayError,
    EmptyNameError,
    InvalidParameterError,
    FontLoadError,
    DocumentEmitError,
    ConfigLoadError,
    TemplateLoadError,
)
from .fonts import FontCache, ReportLabMetrics, is_cff_font, pick_font_file, probe_font_files, register_font_bytes
from .io import FileHandler, gift_filename, sanitize_filename_part
from .logging import get_logger, retry_on_exception
from .page import read_page_size
from .text import MeasureFunc, break_text_into_lines, split_graphemes


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志与重试
    "get_logger",
    "retry_on_exception",
    # 文件操作
    "FileHandler",
    "gift_filename",
    "sanitize_filename_part",
    # 坐标处理
    "target_center_y",
    "block_text_height",
    "block_start_y",
    "centered_x",
    "to_top_left_y",
    # 错误处理
    "ErrorHandler",
    "NameOverlayError",
    "EmptyNameError",
    "InvalidParameterError",
    "FontLoadError",
    "DocumentEmitError",
    "TemplateLoadError",
    "ConfigLoadError",
    # 页面
    "read_page_size",
    # 文本分行
    "MeasureFunc",
    "split_graphemes",
    "break_text_into_lines",
    # 字体
    "FontCache",
    "ReportLabMetrics",
    "pick_font_file",
    "is_cff_font",
    "probe_font_files",
    "register_font_bytes",
]
