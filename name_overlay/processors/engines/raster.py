"""
文件路径：name_overlay/processors/engines/raster.py

说明：Pillow 渲染透明 PNG 后由 PyMuPDF 贴回模板页。

- 优点：各阅读器显示完全一致；缺点：文字不可选中复制。
"""

from __future__ import annotations

from io import BytesIO
from typing import Sequence, Tuple

import fitz  # PyMuPDF

from ...components import FontLoadError, get_logger, to_top_left_y
from ...variables import CONST_ENGINE_RASTER, CONST_RASTER_SCALE, CONST_TARGET_PAGE_INDEX
from ..layout import PlacedLine


logger = get_logger(__name__)


def fill_with_raster(
    template_pdf: bytes,
    placements: Sequence[PlacedLine],
    *,
    font_bytes: bytes,
    font_size: float,
    text_color_rgb: Tuple[float, float, float],
    raster_scale: float = CONST_RASTER_SCALE,
    page_index: int = CONST_TARGET_PAGE_INDEX,
) -> Tuple[str, bytes]:
    """渲染透明 PNG 覆盖到模板页并输出。

    返回 (engine_used, pdf_bytes)。
    """
    # 延迟导入 Pillow
    try:
        from PIL import Image, ImageDraw, ImageFont  # type: ignore
    except Exception as exc:  # noqa: BLE001
        raise RuntimeError(f"缺少 Pillow 依赖，请安装 pillow：{exc}") from exc

    scale = float(raster_scale) if raster_scale and raster_scale > 0 else 1.0
    fill = tuple(int(round(v * 255)) for v in text_color_rgb) + (255,)

    try:
        font = ImageFont.truetype(BytesIO(font_bytes), max(1, int(round(font_size * scale))))
    except OSError as exc:
        raise FontLoadError(f"Pillow 无法载入字体：{exc}") from exc
    # 上升线：Pillow 以文字左上角为绘制起点，需由基线上移 ascent
    ascent, _descent = font.getmetrics()

    doc = fitz.open(stream=template_pdf, filetype="pdf")
    try:
        page = doc[page_index]
        page_w = float(page.rect.width)
        page_h = float(page.rect.height)
        img = Image.new("RGBA", (int(page_w * scale), int(page_h * scale)), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)

        for item in placements:
            x_img = int(item.x * scale)
            y_img = int(to_top_left_y(item.y, page_h) * scale - ascent)
            draw.text((x_img, y_img), item.text, font=font, fill=fill)

        buf = BytesIO()
        img.save(buf, format="PNG")
        page.insert_image(page.rect, stream=buf.getvalue(), keep_proportion=False, overlay=True)
        data = doc.tobytes(deflate=True, garbage=4, clean=True)
    finally:
        doc.close()

    logger.info("Raster 输出完成：%s 行 (%.1f KB)", len(placements), len(data) / 1024.0)
    return (CONST_ENGINE_RASTER, data)


__all__ = ["fill_with_raster"]
