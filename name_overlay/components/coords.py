"""
文件路径：name_overlay/components/coords.py

说明：坐标计算相关通用函数，从包入口拆分而来。

坐标系：PDF 用户空间，左下角为原点，Y 轴向上（ReportLab 同此约定）。
PyMuPDF 以左上角为原点，需经 `to_top_left_y` 翻转。
"""

from __future__ import annotations


def target_center_y(page_height: float, top_margin: float, font_size: float) -> float:
    """单行文本块的垂直中心（固定锚点），与实际行数无关。"""
    return page_height - top_margin - font_size / 2


def block_text_height(line_count: int, font_size: float, line_gap: float) -> float:
    """多行文本块的总高度：每行按字号计高，行与行之间相隔 line_gap。"""
    return (line_count - 1) * line_gap + font_size


def block_start_y(
    anchor_y: float,
    line_count: int,
    font_size: float,
    line_gap: float,
) -> float:
    """首行（最上方）基线起点的 Y，使整个文本块的中点落在 anchor_y 上。"""
    total = block_text_height(line_count, font_size, line_gap)
    return anchor_y + total / 2 - font_size


def centered_x(page_width: float, line_width: float) -> float:
    """单行水平居中时的起点 X。"""
    return (page_width - line_width) / 2


def to_top_left_y(y_bottom_based: float, page_height: float) -> float:
    """将左下原点的 Y 转换为左上原点的 Y（PyMuPDF / Pillow 使用）。"""
    return page_height - y_bottom_based


__all__ = [
    "target_center_y",
    "block_text_height",
    "block_start_y",
    "centered_x",
    "to_top_left_y",
]
