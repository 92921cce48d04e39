"""
文件路径：name_overlay/processors/engines/pymupdf.py

说明：PyMuPDF 直接在模板页上绘制文本；若无法内嵌字体则回退到 ReportLab 合成路径。
"""

from __future__ import annotations

from typing import Sequence, Tuple

import fitz  # PyMuPDF

from ...components import get_logger, to_top_left_y
from ...variables import CONST_ENGINE_PYMUPDF, CONST_ENGINE_REPORTLAB, CONST_TARGET_PAGE_INDEX
from ..layout import PlacedLine
from .reportlab import fill_with_reportlab


logger = get_logger(__name__)

# PyMuPDF 页面资源中的字体引用名
_FITZ_FONT_NAME = "nameoverlay"


def fill_with_pymupdf(
    template_pdf: bytes,
    placements: Sequence[PlacedLine],
    *,
    font_bytes: bytes,
    font_size: float,
    text_color_rgb: Tuple[float, float, float],
    page_index: int = CONST_TARGET_PAGE_INDEX,
) -> Tuple[str, bytes]:
    """在模板页上直接绘制文本；必要时回退 ReportLab 合成路径。

    PlacedLine 的 y 为左下原点，传给 insert_text 前翻转为左上原点。

    返回 (engine_used, pdf_bytes)。
    """
    doc = fitz.open(stream=template_pdf, filetype="pdf")
    try:
        page = doc[page_index]
        try:
            page.insert_font(fontname=_FITZ_FONT_NAME, fontbuffer=font_bytes)
        except Exception as exc:  # noqa: BLE001
            logger.warning("PyMuPDF 字体内嵌失败，回退 ReportLab 合成路径：%s", exc)
            embedded = False
        else:
            embedded = True

        if embedded:
            page_height = float(page.rect.height)
            for item in placements:
                point = (item.x, to_top_left_y(item.y, page_height))
                page.insert_text(
                    point,
                    item.text,
                    fontsize=font_size,
                    fontname=_FITZ_FONT_NAME,
                    color=text_color_rgb,
                )
            data = doc.tobytes(deflate=True, garbage=4, clean=True)
    finally:
        doc.close()

    if not embedded:
        data = fill_with_reportlab(
            template_pdf,
            placements,
            font_bytes=font_bytes,
            font_size=font_size,
            text_color_rgb=text_color_rgb,
            page_index=page_index,
        )
        return (CONST_ENGINE_REPORTLAB, data)

    logger.info("PyMuPDF 输出完成：%s 行 (%.1f KB)", len(placements), len(data) / 1024.0)
    return (CONST_ENGINE_PYMUPDF, data)


__all__ = ["fill_with_pymupdf"]
