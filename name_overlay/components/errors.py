"""
文件路径：name_overlay/components/errors.py

说明：统一错误信息格式与异常层级。

- 所有业务异常均继承 `NameOverlayError`，消息格式为 "[错误码] 描述"；
- 字体度量自身抛出的异常不在此层级内，按原样向上传播。
"""

from __future__ import annotations

from ..variables import (
    ERR_CONFIG_LOAD_FAILED,
    ERR_FONT_LOAD_FAILED,
    ERR_INVALID_PARAMETER,
    ERR_INVALID_PDF,
    ERR_NAME_EMPTY,
    ERR_PDF_WRITE_FAILED,
)


class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


class NameOverlayError(Exception):
    """名字叠加流程中所有可预期失败的基类。"""

    err_code: int = 0

    def __init__(self, message: str) -> None:
        super().__init__(ErrorHandler.format_error(self.err_code, message))


class EmptyNameError(NameOverlayError, ValueError):
    """输入错误：名字为空（去除首尾空白后）。"""

    err_code = ERR_NAME_EMPTY


class InvalidParameterError(NameOverlayError, ValueError):
    """几何参数非法：字号或最大行宽 <= 0 等调用方契约违例。"""

    err_code = ERR_INVALID_PARAMETER


class FontLoadError(NameOverlayError):
    err_code = ERR_FONT_LOAD_FAILED


class DocumentEmitError(NameOverlayError):
    err_code = ERR_PDF_WRITE_FAILED


class TemplateLoadError(NameOverlayError):
    """模板 PDF 无法解析，或目标页面不存在。"""

    err_code = ERR_INVALID_PDF


class ConfigLoadError(NameOverlayError):
    err_code = ERR_CONFIG_LOAD_FAILED


__all__ = [
    "ErrorHandler",
    "NameOverlayError",
    "EmptyNameError",
    "InvalidParameterError",
    "FontLoadError",
    "DocumentEmitError",
    "TemplateLoadError",
    "ConfigLoadError",
]
