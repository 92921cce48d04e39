"""
文件路径：name_overlay/processors/__init__.py

说明：
- layout.py：分行与块定位（纯计算）；
- engines/{pymupdf.py, reportlab.py, raster.py}：三引擎绘制。
"""

from .layout import LayoutParams, MeasuredLine, PlacedLine, layout_name, measure_lines, position_lines

__all__ = [
    "LayoutParams",
    "MeasuredLine",
    "PlacedLine",
    "layout_name",
    "measure_lines",
    "position_lines",
]
