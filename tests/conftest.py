"""
pytest 全局配置：将项目根目录加入 sys.path，确保 `from name_overlay...` 可被导入。

公共夹具：
- fake_measure：每个字素宽 10pt（与字号无关），便于手算分行；
- vera_font_bytes：ReportLab 发行包自带的 Vera.ttf，缺失时跳过；
- make_template：用 ReportLab 生成指定尺寸/页数的模板 PDF 字节。
"""

from __future__ import annotations

import sys
from io import BytesIO
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


def _unit_width_measure(text: str, font_size: float) -> float:
    from name_overlay.components import split_graphemes

    return 10.0 * len(split_graphemes(text))


@pytest.fixture
def fake_measure():
    return _unit_width_measure


@pytest.fixture(scope="session")
def vera_font_path() -> Path:
    import reportlab

    path = Path(reportlab.__file__).resolve().parent / "fonts" / "Vera.ttf"
    if not path.exists():
        pytest.skip(f"ReportLab 未附带 Vera.ttf：{path}")
    return path


@pytest.fixture(scope="session")
def vera_font_bytes(vera_font_path: Path) -> bytes:
    return vera_font_path.read_bytes()


@pytest.fixture
def make_template():
    from reportlab.pdfgen import canvas

    def _make(width: float = 595.28, height: float = 841.89, pages: int = 1) -> bytes:
        buf = BytesIO()
        c = canvas.Canvas(buf, pagesize=(width, height))
        for i in range(pages):
            c.setFont("Helvetica", 10)
            c.drawString(20, 20, f"page {i + 1}")
            c.showPage()
        c.save()
        return buf.getvalue()

    return _make


@pytest.fixture(scope="session")
def cff_font_bytes() -> bytes:
    """用 fontTools 构造一份最小的 CFF 轮廓 OpenType 字体（仅含 "A"）。"""
    font_builder = pytest.importorskip("fontTools.fontBuilder")
    t2_pen = pytest.importorskip("fontTools.pens.t2CharStringPen")

    pen = t2_pen.T2CharStringPen(600, None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    glyph = pen.getCharString()
    char_strings = {".notdef": glyph, "A": glyph}

    fb = font_builder.FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupCFF("OverlayTest-Regular", {"FullName": "OverlayTest-Regular"}, char_strings, {})
    fb.setupHorizontalMetrics({name: (600, 100) for name in char_strings})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "OverlayTest", "styleName": "Regular", "psName": "OverlayTest-Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()
