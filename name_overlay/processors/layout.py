"""
文件路径：name_overlay/processors/layout.py

说明：名字版式计算（分行 + 块定位），纯计算，无 IO。

- 分行：委托 `components.text.break_text_into_lines`；
- 定位：文本块整体以固定锚点 target_center_y 为垂直中心，每行各自水平居中；
- 不做页面边界钳制，超长名字可能超出可见区域。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..components import (
    MeasureFunc,
    EmptyNameError,
    InvalidParameterError,
    block_start_y,
    break_text_into_lines,
    centered_x,
    get_logger,
    target_center_y,
)
from ..variables import (
    STYLE_FONT_SIZE_DEFAULT,
    STYLE_LINE_HEIGHT_DEFAULT,
    STYLE_TOP_MARGIN_DEFAULT,
    STYLE_MARGIN_X_DEFAULT,
)


logger = get_logger(__name__)


@dataclass(frozen=True)
class LayoutParams:
    """单次生成请求的版式参数（pt），请求期间不可变。

    属性：
        page_width, page_height: 目标页面宽高。
        font_size: 字号。
        line_height: 行高倍数，行距 = font_size * line_height。
        top_margin: 单行文本顶部到页面顶边的距离。
        margin_x: 左右各自的水平边距，最大行宽 = page_width - 2 * margin_x。
    """

    page_width: float
    page_height: float
    font_size: float = STYLE_FONT_SIZE_DEFAULT
    line_height: float = STYLE_LINE_HEIGHT_DEFAULT
    top_margin: float = STYLE_TOP_MARGIN_DEFAULT
    margin_x: float = STYLE_MARGIN_X_DEFAULT

    @property
    def max_line_width(self) -> float:
        return self.page_width - self.margin_x * 2

    @property
    def line_gap(self) -> float:
        return self.font_size * self.line_height

    @property
    def anchor_y(self) -> float:
        return target_center_y(self.page_height, self.top_margin, self.font_size)


@dataclass(frozen=True)
class MeasuredLine:
    text: str
    width: float


@dataclass(frozen=True)
class PlacedLine:
    """已定位的行：x, y 为基线起点（左下原点，Y 向上）。"""

    text: str
    width: float
    x: float
    y: float


def measure_lines(lines: Sequence[str], measure: MeasureFunc, font_size: float) -> List[MeasuredLine]:
    return [MeasuredLine(text=line, width=float(measure(line, font_size))) for line in lines]


def position_lines(lines: Sequence[MeasuredLine], params: LayoutParams) -> List[PlacedLine]:
    """为每一行计算基线起点坐标。

    - 首行 y = anchor_y + 块高 / 2 - font_size，之后每行下移一个行距；
    - x = (page_width - 行宽) / 2，逐行独立居中。

    返回与输入等长、同序的 PlacedLine 列表。
    """
    if params.font_size <= 0:
        raise InvalidParameterError(f"字号必须大于 0：{params.font_size}")
    if not lines:
        return []

    gap = params.line_gap
    start_y = block_start_y(params.anchor_y, len(lines), params.font_size, gap)
    placed = [
        PlacedLine(
            text=line.text,
            width=line.width,
            x=centered_x(params.page_width, line.width),
            y=start_y - index * gap,
        )
        for index, line in enumerate(lines)
    ]
    logger.debug(
        "块定位：行数=%s，锚点 y=%.2f，首行 y=%.2f，行距=%.2f",
        len(placed),
        params.anchor_y,
        start_y,
        gap,
    )
    return placed


def layout_name(name: str, measure: MeasureFunc, params: LayoutParams) -> List[PlacedLine]:
    """版式入口：名字 -> 已定位的行序列，供文档绘制引擎使用。

    参数：
        name: 已清洗的名字，不能为空。
        measure: 度量函数 measure(text, font_size) -> 宽度。
        params: 版式参数。

    异常：
        EmptyNameError: 名字为空。
        InvalidParameterError: 字号或最大行宽 <= 0。
    """
    if not name:
        raise EmptyNameError("请输入名字")
    raw_lines = break_text_into_lines(name, measure, params.font_size, params.max_line_width)
    placed = position_lines(measure_lines(raw_lines, measure, params.font_size), params)
    logger.info("名字版式完成：%r -> %s 行", name, len(placed))
    return placed


__all__ = [
    "LayoutParams",
    "MeasuredLine",
    "PlacedLine",
    "measure_lines",
    "position_lines",
    "layout_name",
]
