"""
文件路径：name_overlay/processors/engines/reportlab.py

说明：ReportLab 路径的文字图层生成与 PyPDF2 合并，全程在内存中以字节串流转。
"""

from __future__ import annotations

from io import BytesIO
from typing import Sequence, Tuple

from PyPDF2 import PdfReader, PdfWriter
from reportlab.pdfgen import canvas

from ...components import get_logger, read_page_size, register_font_bytes
from ...variables import CONST_TARGET_PAGE_INDEX
from ..layout import PlacedLine


logger = get_logger(__name__)


def build_text_layer(
    page_size: Tuple[float, float],
    placements: Sequence[PlacedLine],
    *,
    font_name: str,
    font_size: float,
    text_color_rgb: Tuple[float, float, float],
) -> bytes:
    """使用 ReportLab 生成仅含文字的单页图层 PDF，返回字节串。"""
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=page_size)
    c.setFillColorRGB(*text_color_rgb)
    c.setFont(font_name, font_size)
    for item in placements:
        c.drawString(item.x, item.y, item.text)
    c.showPage()
    c.save()
    return buf.getvalue()


def merge_pdfs(base_pdf: bytes, overlay_pdf: bytes, page_index: int = CONST_TARGET_PAGE_INDEX) -> bytes:
    """将 overlay 首页覆盖到 base 的指定页上，其余页面原样保留。"""
    base_reader = PdfReader(BytesIO(base_pdf))
    overlay_page = PdfReader(BytesIO(overlay_pdf)).pages[0]

    writer = PdfWriter()
    for i, page in enumerate(base_reader.pages):
        if i == page_index:
            page.merge_page(overlay_page)  # PyPDF2 3.x API
        writer.add_page(page)

    out = BytesIO()
    writer.write(out)
    return out.getvalue()


def fill_with_reportlab(
    template_pdf: bytes,
    placements: Sequence[PlacedLine],
    *,
    font_bytes: bytes,
    font_size: float,
    text_color_rgb: Tuple[float, float, float],
    page_index: int = CONST_TARGET_PAGE_INDEX,
) -> bytes:
    """生成文字图层并与模板合并，返回最终 PDF 字节串。"""
    page_size = read_page_size(template_pdf, page_index)
    font_name = register_font_bytes(font_bytes)
    overlay = build_text_layer(
        page_size,
        placements,
        font_name=font_name,
        font_size=font_size,
        text_color_rgb=text_color_rgb,
    )
    result = merge_pdfs(template_pdf, overlay, page_index)
    logger.info("ReportLab 输出完成：%s 行 (%.1f KB)", len(placements), len(result) / 1024.0)
    return result


__all__ = ["build_text_layer", "merge_pdfs", "fill_with_reportlab"]
