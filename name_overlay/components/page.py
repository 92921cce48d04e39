"""
文件路径：name_overlay/components/page.py

说明：页面相关工具函数（读取模板页面尺寸）。
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional, Tuple

import pdfplumber

from ..variables import CONST_TARGET_PAGE_INDEX
from .errors import TemplateLoadError


def read_page_size(pdf_bytes: bytes, page_index: int = CONST_TARGET_PAGE_INDEX) -> Tuple[float, float]:
    """读取指定页面的宽高（pt）。

    异常：
        TemplateLoadError: 模板不是有效 PDF、页面索引越界或 PDF 不含任何页面。
    """
    size: Optional[Tuple[float, float]] = None
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            total = len(pdf.pages)
            if 0 <= page_index < total:
                page = pdf.pages[page_index]
                size = (float(page.width), float(page.height))
    except Exception as exc:  # noqa: BLE001
        raise TemplateLoadError(f"模板 PDF 无法解析：{exc}") from exc

    if size is None:
        raise TemplateLoadError(f"页面索引越界：{page_index}/{total}")
    return size


__all__ = ["read_page_size"]
