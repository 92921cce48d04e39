"""
文件路径：name_overlay/processors/engines/__init__.py

说明：三种文档绘制引擎，输入均为模板字节 + 已定位的行，输出最终 PDF 字节：
- `pymupdf.py`：直接写入文本（默认）；
- `reportlab.py`：生成文字图层后合并；
- `raster.py`：Pillow 渲染 PNG 后贴图。
"""

from .pymupdf import fill_with_pymupdf
from .raster import fill_with_raster
from .reportlab import fill_with_reportlab

__all__ = ["fill_with_pymupdf", "fill_with_raster", "fill_with_reportlab"]
