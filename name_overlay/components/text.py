"""
文件路径：name_overlay/components/text.py

说明：文本切分与按宽度分行（贪心策略），从包入口拆分而来。

- 宽度一律由调用方提供的度量函数给出，本模块不估算字宽；
- 分行单位为扩展字素簇（`regex` 的 `\\X`），组合字符与表情序列不会被拆开。
"""

from __future__ import annotations

from typing import Callable, List

import regex

from .errors import InvalidParameterError
from .logging import get_logger


logger = get_logger(__name__)

# measure(text, font_size) -> 渲染宽度（pt）
MeasureFunc = Callable[[str, float], float]

_GRAPHEME_RE = regex.compile(r"\X")


def split_graphemes(text: str) -> List[str]:
    """将文本拆分为扩展字素簇列表；拼接结果与原文完全一致。"""
    if not text:
        return []
    return _GRAPHEME_RE.findall(text)


def break_text_into_lines(
    text: str,
    measure: MeasureFunc,
    font_size: float,
    max_width: float,
) -> List[str]:
    """按实际渲染宽度将文本贪心分行。

    逐个字素尝试追加到当前行并度量整行宽度：
    - 宽度 > max_width 且当前行非空：提交当前行，新行从该字素开始；
    - 否则接受该字素（恰好等于 max_width 也留在当前行）。

    单个字素本身超宽时独占一行，不报错，因此个别行可能超过 max_width。
    `measure` 抛出的异常原样向上传播。

    参数：
        text: 待分行文本；为空时返回空列表（空名字应在调用前被拒绝）。
        measure: 度量函数 measure(text, font_size) -> 宽度。
        font_size: 字号（pt），必须 > 0。
        max_width: 最大行宽（pt），必须 > 0。

    返回：
        非空字符串列表，按顺序拼接等于原文。
    """
    if font_size <= 0:
        raise InvalidParameterError(f"字号必须大于 0：{font_size}")
    if max_width <= 0:
        raise InvalidParameterError(f"最大行宽必须大于 0：{max_width}")

    lines: List[str] = []
    current_line = ""

    for unit in split_graphemes(text):
        trial = current_line + unit
        trial_width = measure(trial, font_size)
        if trial_width > max_width and current_line:
            lines.append(current_line)
            current_line = unit
        else:
            current_line = trial

    if current_line:
        lines.append(current_line)

    logger.debug("分行输入：%r，最大行宽：%.2f，输出：%s", text, max_width, lines)
    return lines


__all__ = [
    "MeasureFunc",
    "split_graphemes",
    "break_text_into_lines",
]
