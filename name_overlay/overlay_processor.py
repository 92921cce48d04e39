"""
文件路径：name_overlay/overlay_processor.py

模块职责：
- 单次生成请求的门面：名字清洗 -> 字体载入（缓存）-> 分行与定位 -> 引擎绘制 -> PDF 字节。
- 仅通过 `components` 进行通用操作（日志、文件、字体），跨模块变量统一从 `variables.py` 引用。

注意：
- 字体字节缓存由调用方持有并显式传入（FontCache），处理器本身不持有全局状态。
- 版式计算与字形度量的异常原样向上传播；仅绘制引擎的异常统一包装为 DocumentEmitError。
- 坐标系：版式结果为左下原点；PyMuPDF / Raster 引擎内部自行翻转 Y 轴。

用法示例：
    processor = NameOverlayProcessor(FontCache.from_path(Path("config/fonts/a.ttf")))
    pdf_bytes = processor.generate("小明", template_bytes)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from .components import (
    DocumentEmitError,
    FileHandler,
    FontCache,
    InvalidParameterError,
    NameOverlayError,
    ReportLabMetrics,
    get_logger,
    read_page_size,
)
from .data_handler import build_layout_params, sanitize_name, text_color_from_config
from .processors.engines import fill_with_pymupdf, fill_with_raster, fill_with_reportlab
from .processors.layout import LayoutParams, PlacedLine, layout_name
from .variables import (
    CONST_ENGINE_DEFAULT,
    CONST_ENGINE_PYMUPDF,
    CONST_ENGINE_RASTER,
    CONST_ENGINE_REPORTLAB,
    CONST_ENGINES,
    CONST_RASTER_SCALE,
    CONST_TARGET_PAGE_INDEX,
)


logger = get_logger(__name__)


class NameOverlayProcessor:
    """名字叠加处理器：版式计算与文档绘制。

    参数：
        font_cache: 字体字节缓存，首次生成时载入。
        layout_overrides: 版式覆盖配置（见 data_handler.load_layout_config）。
        engine: 绘制引擎，pymupdf / reportlab / raster。
        page_index: 写入的页面（0 基）。
    """

    def __init__(
        self,
        font_cache: FontCache,
        layout_overrides: Optional[Mapping[str, object]] = None,
        engine: str = CONST_ENGINE_DEFAULT,
        page_index: int = CONST_TARGET_PAGE_INDEX,
        raster_scale: float = CONST_RASTER_SCALE,
    ) -> None:
        if engine not in CONST_ENGINES:
            raise InvalidParameterError(f"未知的绘制引擎：{engine}，可选：{', '.join(CONST_ENGINES)}")
        self.font_cache = font_cache
        self.layout_overrides = dict(layout_overrides or {})
        self.engine = engine
        self.page_index = page_index
        self.raster_scale = raster_scale
        self.text_color = text_color_from_config(self.layout_overrides)
        # 运行时信息：用于 CLI/日志展示
        self.last_engine_used: Optional[str] = None
        self.last_params: Optional[LayoutParams] = None
        self.last_placements: List[PlacedLine] = []

    # -----------------------------
    # 版式计算
    # -----------------------------
    def _layout(self, name: str, page_width: float, page_height: float) -> Tuple[LayoutParams, List[PlacedLine]]:
        """单次请求的版式计算；调用方使用返回值，last_params / last_placements 仅供展示。"""
        clean = sanitize_name(name)
        font_bytes = self.font_cache.get_or_load()
        metrics = ReportLabMetrics(font_bytes)
        params = build_layout_params(page_width, page_height, self.layout_overrides)
        placements = layout_name(clean, metrics.width_of_text_at_size, params)
        self.last_params = params
        self.last_placements = placements
        return params, placements

    def plan(self, name: str, page_width: float, page_height: float) -> List[PlacedLine]:
        """计算名字在给定页面尺寸上的逐行位置，不生成 PDF。"""
        _params, placements = self._layout(name, page_width, page_height)
        return placements

    # -----------------------------
    # 生成 PDF
    # -----------------------------
    def generate(self, name: str, template_pdf: bytes) -> bytes:
        """在模板 PDF 的目标页上写入名字，返回新 PDF 字节串。

        异常：
            EmptyNameError: 名字为空。
            InvalidParameterError: 版式参数非法。
            TemplateLoadError: 模板不是有效 PDF 或目标页面不存在。
            FontLoadError: 字体无法载入。
            DocumentEmitError: 绘制或序列化失败。
        """
        clean = sanitize_name(name)
        page_width, page_height = read_page_size(template_pdf, self.page_index)
        params, placements = self._layout(clean, page_width, page_height)
        font_bytes = self.font_cache.get_or_load()
        font_size = params.font_size

        try:
            if self.engine == CONST_ENGINE_PYMUPDF:
                engine_used, data = fill_with_pymupdf(
                    template_pdf,
                    placements,
                    font_bytes=font_bytes,
                    font_size=font_size,
                    text_color_rgb=self.text_color,
                    page_index=self.page_index,
                )
            elif self.engine == CONST_ENGINE_RASTER:
                engine_used, data = fill_with_raster(
                    template_pdf,
                    placements,
                    font_bytes=font_bytes,
                    font_size=font_size,
                    text_color_rgb=self.text_color,
                    raster_scale=self.raster_scale,
                    page_index=self.page_index,
                )
            else:
                engine_used = CONST_ENGINE_REPORTLAB
                data = fill_with_reportlab(
                    template_pdf,
                    placements,
                    font_bytes=font_bytes,
                    font_size=font_size,
                    text_color_rgb=self.text_color,
                    page_index=self.page_index,
                )
        except NameOverlayError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise DocumentEmitError(f"使用 {self.engine} 写入失败: {exc}") from exc

        self.last_engine_used = engine_used
        return data

    def generate_to_file(
        self,
        name: str,
        template_path: Path,
        output_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
    ) -> Path:
        """读取模板文件、生成并写出 PDF，返回输出路径。

        output_path 未提供时，按名字生成 "給{name}的禮物.pdf" 到 output 目录（或 output_dir）。
        """
        clean = sanitize_name(name)
        template_pdf = FileHandler.read_bytes(Path(template_path))
        data = self.generate(clean, template_pdf)
        out = output_path if output_path is not None else FileHandler.output_path_for_name(clean, output_dir)
        FileHandler.write_bytes(out, data)
        logger.info("PDF 已产生：%s (%.1f KB, engine=%s)", out, len(data) / 1024.0, self.last_engine_used)
        return out


__all__ = ["NameOverlayProcessor"]
