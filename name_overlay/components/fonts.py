"""
文件路径：name_overlay/components/fonts.py

说明：字体探测、字体字节缓存与字形度量。

- `FontCache`：进程内只载入一次的字体字节缓存，首次访问时加锁载入，之后只读；
- `ReportLabMetrics`：以 ReportLab TTFont 注册字体，提供 width_of_text_at_size 度量；
- `pick_font_file`：按优先级探测可用的 TrueType 字体文件。

ReportLab 的 TTFont 不支持 PostScript（CFF）轮廓，以 "OTTO" 开头的字体一律跳过或拒绝。
"""

from __future__ import annotations

import hashlib
import threading
from io import BytesIO
from pathlib import Path
from typing import Callable, Dict, List, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..variables import (
    PATH_FONT_FILE,
    PATH_FONTS_DIR,
    STYLE_FONT_FACE_NAME,
    CONST_CANDIDATE_CJK_FONT_PATHS,
)
from .errors import FontLoadError
from .io import FileHandler
from .logging import get_logger


logger = get_logger(__name__)

_FONT_SUFFIXES = {".ttf"}
# CFF 轮廓 OpenType 字体的 sfnt 版本标记
_CFF_SFNT_TAG = b"OTTO"


def is_cff_font(font_bytes: bytes) -> bool:
    """判断字体字节是否为 PostScript（CFF）轮廓的 OpenType 字体。"""
    return font_bytes[:4] == _CFF_SFNT_TAG


def _read_header(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:  # noqa: P103
            return f.read(4)
    except OSError:
        return b""


# =============================
# 字体探测
# =============================
def probe_font_files(explicit: Optional[Path] = None) -> List[Path]:
    """探测可用字体文件（TrueType），按优先级返回去重列表。

    优先级：
    1) 参数 explicit，其次 `PATH_FONT_FILE`
    2) `config/fonts/` 目录下的 .ttf 文件（按文件名排序）
    3) `CONST_CANDIDATE_CJK_FONT_PATHS` 中存在的文件
    """
    seen: set[str] = set()
    results: List[Path] = []

    def _add(p: Path) -> None:
        key = str(p.resolve())
        if key in seen or not p.is_file() or p.suffix.lower() not in _FONT_SUFFIXES:
            return
        seen.add(key)
        if is_cff_font(_read_header(p)):
            logger.info("跳过 CFF 轮廓字体（不支持）：%s", p)
            return
        results.append(p)

    for p in (explicit, PATH_FONT_FILE):
        if p:
            _add(Path(p))

    if PATH_FONTS_DIR.exists():
        for p in sorted(PATH_FONTS_DIR.glob("*.ttf")):
            _add(p)

    for s in CONST_CANDIDATE_CJK_FONT_PATHS:
        _add(Path(s))

    return results


def pick_font_file(explicit: Optional[Path] = None) -> Optional[Path]:
    """选择首个可用的字体文件，若无可用则返回 None。"""
    fonts = probe_font_files(explicit)
    return fonts[0] if fonts else None


# =============================
# 字体字节缓存
# =============================
class FontCache:
    """字体字节缓存：至多载入一次，载入后不再失效。

    多个请求并发首次访问时，由锁保证只触发一次载入。

    用法示例：
        cache = FontCache.from_path(Path("config/fonts/a.ttf"))
        font_bytes = cache.get_or_load()
    """

    def __init__(self, loader: Callable[[], bytes]) -> None:
        self._loader = loader
        self._data: Optional[bytes] = None
        self._lock = threading.Lock()
        self.load_count: int = 0

    @classmethod
    def from_path(cls, path: Path) -> "FontCache":
        """以文件路径构造缓存，载入失败统一转换为 FontLoadError。"""
        font_path = Path(path)

        def _load() -> bytes:
            try:
                return FileHandler.read_bytes(font_path)
            except OSError as exc:
                raise FontLoadError(f"无法载入字体文件: {font_path}") from exc

        return cls(_load)

    @classmethod
    def from_bytes(cls, data: bytes) -> "FontCache":
        return cls(lambda: data)

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    def get_or_load(self) -> bytes:
        data = self._data
        if data is not None:
            return data
        with self._lock:
            if self._data is None:
                loaded = self._loader()
                if not loaded:
                    raise FontLoadError("字体数据为空")
                self._data = bytes(loaded)
                self.load_count += 1
                logger.info("字体已载入缓存：%.1f KB", len(self._data) / 1024.0)
            return self._data


# =============================
# 字形度量
# =============================
_REGISTERED: Dict[str, str] = {}
_REGISTER_LOCK = threading.Lock()


def register_font_bytes(font_bytes: bytes, face_prefix: str = STYLE_FONT_FACE_NAME) -> str:
    """将字体字节注册到 ReportLab，返回注册名。

    同一份字体字节只注册一次；注册名带内容摘要，不同字体不会互相覆盖。

    异常：
        FontLoadError: CFF 轮廓字体、文件损坏或格式不支持。
    """
    if is_cff_font(font_bytes):
        raise FontLoadError("不支持 PostScript（CFF）轮廓的 OpenType 字体，请改用 TrueType（.ttf）字体")
    digest = hashlib.sha1(font_bytes).hexdigest()[:10]
    with _REGISTER_LOCK:
        face_name = _REGISTERED.get(digest)
        if face_name is not None:
            return face_name
        face_name = f"{face_prefix}-{digest}"
        try:
            pdfmetrics.registerFont(TTFont(face_name, BytesIO(font_bytes)))
        except Exception as exc:  # noqa: BLE001
            raise FontLoadError(f"字体注册失败（文件损坏或格式不支持）：{exc}") from exc
        _REGISTERED[digest] = face_name
        logger.info("已注册字体：%s", face_name)
        return face_name


class ReportLabMetrics:
    """基于 ReportLab 字体度量（advance width 表）的宽度提供者。

    即使在 PyMuPDF / Raster 路径中也沿用该度量，保证分行与居中一致。
    """

    def __init__(self, font_bytes: bytes) -> None:
        self.face_name = register_font_bytes(font_bytes)

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return float(pdfmetrics.stringWidth(text, self.face_name, size))

    __call__ = width_of_text_at_size


__all__ = [
    "is_cff_font",
    "probe_font_files",
    "pick_font_file",
    "FontCache",
    "register_font_bytes",
    "ReportLabMetrics",
]
