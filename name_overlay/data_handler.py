"""
文件路径：name_overlay/data_handler.py

模块职责：
- 清洗用户输入的名字（去首尾空白，空名字在进入版式计算前被拒绝）。
- 加载版式覆盖配置（字号、行高、边距、颜色），与默认样式合并为 LayoutParams。
- 读取批量名字列表（JSON / CSV）。

说明：
- 仅依赖标准库与 `variables.py` / `components`，不依赖 PDF 库。
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .components import ConfigLoadError, EmptyNameError, get_logger
from .processors.layout import LayoutParams
from .variables import (
    PATH_LAYOUT_JSON,
    STYLE_FONT_SIZE_DEFAULT,
    STYLE_LINE_HEIGHT_DEFAULT,
    STYLE_TOP_MARGIN_DEFAULT,
    STYLE_MARGIN_X_DEFAULT,
    STYLE_TEXT_COLOR_RGB,
    CONST_ENCODING,
    CONST_LAYOUT_CONFIG_KEYS,
)


logger = get_logger(__name__)


def _json_loads_strip_bom(content: str):
    """解析 JSON 字符串，自动去除 UTF-8 BOM。"""
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    return json.loads(content)


def sanitize_name(raw: Optional[str]) -> str:
    """去除名字首尾空白；为空时抛出 EmptyNameError。"""
    name = "" if raw is None else str(raw).strip()
    if not name:
        raise EmptyNameError("请输入名字")
    return name


def resolve_text_color(value: Sequence[float]) -> Tuple[float, float, float]:
    """解析文字颜色，返回 [0, 1] 区间的 RGB 三元组。

    - 三个分量均 <= 1 视为单位区间；
    - 否则按 0-255 处理并归一化。

    仅接受列表或元组，字符串等其他可迭代对象一律拒绝。
    """
    if not isinstance(value, (list, tuple)):
        raise ConfigLoadError(f"text_color 需为包含 3 个数值的数组：{value!r}")
    try:
        r, g, b = (float(v) for v in value)
    except (TypeError, ValueError) as exc:
        raise ConfigLoadError(f"text_color 需为 3 个数值：{value!r}") from exc
    comps = (r, g, b)
    if any(c < 0 for c in comps):
        raise ConfigLoadError(f"text_color 分量不能为负：{value!r}")
    if all(c <= 1.0 for c in comps):
        return comps
    if any(c > 255 for c in comps):
        raise ConfigLoadError(f"text_color 分量超出 0-255：{value!r}")
    return (r / 255.0, g / 255.0, b / 255.0)


def load_layout_config(config_path: Optional[Path] = None) -> Dict[str, object]:
    """加载版式覆盖配置 JSON。

    参数：
        config_path: 配置路径；默认读取 `config/layout.json`。

    返回：
        仅包含已知键的字典，例如：{"font_size": 96, "top_margin": 150}；
        文件不存在时返回空字典。
    """
    path = config_path or PATH_LAYOUT_JSON
    if not path.exists():
        logger.info("未找到版式配置文件，将使用默认样式：%s", path)
        return {}
    try:
        data = _json_loads_strip_bom(path.read_text(encoding=CONST_ENCODING))
    except (OSError, ValueError) as exc:
        raise ConfigLoadError(f"版式配置加载失败: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigLoadError(f"版式配置需为对象结构：{path}")

    result: Dict[str, object] = {}
    for key, value in data.items():
        if key not in CONST_LAYOUT_CONFIG_KEYS:
            logger.warning("忽略未知的版式配置项：%s", key)
            continue
        if key == "text_color":
            result[key] = resolve_text_color(value)
            continue
        try:
            result[key] = float(value)
        except (TypeError, ValueError) as exc:
            raise ConfigLoadError(f"版式配置项 {key} 需为数值：{value!r}") from exc
    return result


def build_layout_params(
    page_width: float,
    page_height: float,
    overrides: Optional[Mapping[str, object]] = None,
) -> LayoutParams:
    """以默认样式为基础、应用覆盖配置，构造单次请求的 LayoutParams。"""
    ov = dict(overrides or {})
    return LayoutParams(
        page_width=float(page_width),
        page_height=float(page_height),
        font_size=float(ov.get("font_size", STYLE_FONT_SIZE_DEFAULT)),
        line_height=float(ov.get("line_height", STYLE_LINE_HEIGHT_DEFAULT)),
        top_margin=float(ov.get("top_margin", STYLE_TOP_MARGIN_DEFAULT)),
        margin_x=float(ov.get("margin_x", STYLE_MARGIN_X_DEFAULT)),
    )


def text_color_from_config(overrides: Optional[Mapping[str, object]] = None) -> Tuple[float, float, float]:
    ov = overrides or {}
    color = ov.get("text_color")
    return resolve_text_color(color) if color is not None else STYLE_TEXT_COLOR_RGB


def _clean_names(items: Iterable[object]) -> List[str]:
    names: List[str] = []
    for item in items:
        if item is None:
            continue
        name = str(item).strip()
        if name:
            names.append(name)
    return names


def load_names_json(path: Path) -> List[str]:
    """从 JSON 文件加载批量名字。

    支持两种结构：
    - 数组：["小明", "小華"]
    - 对象：{"names": [ ... ]}

    返回：
        名字列表（已去除空白与空值）。
    """
    data = _json_loads_strip_bom(path.read_text(encoding=CONST_ENCODING))
    if isinstance(data, dict) and isinstance(data.get("names"), list):
        items = data["names"]
    elif isinstance(data, list):
        items = data
    else:
        raise ConfigLoadError("批量 JSON 结构需为数组或包含 names 数组的对象")
    return _clean_names(items)


def load_names_csv(path: Path) -> List[str]:
    """从 CSV 文件加载批量名字。

    若表头包含 name 列则读取该列，否则读取第一列（首行视为数据）。
    """
    with path.open("r", encoding="utf-8-sig", newline="") as f:  # noqa: P103
        rows = [row for row in csv.reader(f) if row]
    if not rows:
        return []
    header = [h.strip().lower() for h in rows[0]]
    if "name" in header:
        idx = header.index("name")
        return _clean_names(row[idx] if idx < len(row) else None for row in rows[1:])
    return _clean_names(row[0] for row in rows)


__all__ = [
    "sanitize_name",
    "resolve_text_color",
    "load_layout_config",
    "build_layout_params",
    "text_color_from_config",
    "load_names_json",
    "load_names_csv",
]
