"""
文件路径：main.py

命令行入口：
- 功能：读取模板 PDF，将名字以自订字体居中写入固定位置，输出 "給{名字}的禮物.pdf"。
- 依赖：`name_overlay/overlay_processor.py`、`name_overlay/data_handler.py`、`name_overlay/components`。

快速使用示例：
    # 1) 若没有示例模板，本程序可生成一份深色背景的空白模板
    python main.py --make-example

    # 2) 为单个名字生成 PDF
    python main.py --name 小明 --template examples/Cat.pdf --font config/fonts/ChenYuluoyan-Thin-Monospaced.ttf

    # 3) 批量：JSON 数组或 CSV（name 列或第一列）
    python main.py --batch-json examples/names.json --batch-output-dir output/batch

    # 4) 仅查看分行与坐标，不写 PDF
    python main.py --name 很長很長的名字 --dry-run

运行说明：
- 字号、行高、顶部边距、左右边距、文字颜色可在 config/layout.json 中覆盖（格式见 config/layout.example.json），或用 --config 指定其他文件。
- 字体未指定时，依次尝试 config/fonts/ 下的字体与系统常见中文字体。
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from name_overlay.components import (
    FileHandler,
    FontCache,
    NameOverlayError,
    get_logger,
    pick_font_file,
    read_page_size,
)
from name_overlay.data_handler import load_layout_config, load_names_csv, load_names_json
from name_overlay.overlay_processor import NameOverlayProcessor
from name_overlay.variables import (
    PATH_DEFAULT_TEMPLATE_PDF,
    CONST_ENGINES,
    CONST_ENGINE_DEFAULT,
    ERR_FONT_LOAD_FAILED,
)


logger = get_logger(__name__)


def _log_runtime_capabilities() -> None:
    """启动时输出运行环境信息：PyMuPDF 版本与字体探测结果。"""
    try:
        import importlib.metadata as im

        version = im.version("PyMuPDF")
    except Exception:  # noqa: BLE001
        version = None
    logger.info("运行环境：PyMuPDF version=%s, metrics=ReportLab.pdfmetrics", version or "unknown")


def _ensure_example_pdf(target: Optional[Path] = None) -> Path:
    """若示例模板不存在，则生成一份深色背景的单页 A4 模板。"""
    from reportlab.pdfgen import canvas  # 延迟导入以加快 CLI 启动

    pdf_path = target or PATH_DEFAULT_TEMPLATE_PDF
    if pdf_path.exists():
        return pdf_path
    pdf_path.parent.mkdir(parents=True, exist_ok=True)

    width, height = 595.28, 841.89  # A4
    c = canvas.Canvas(str(pdf_path), pagesize=(width, height))
    # 深色底，米白色名字才看得清
    c.setFillColorRGB(0.16, 0.20, 0.27)
    c.rect(0, 0, width, height, stroke=0, fill=1)
    c.setFillColorRGB(0.8, 0.8, 0.8)
    c.setFont("Helvetica", 14)
    c.drawCentredString(width / 2, 80, "Name Overlay Template")
    c.save()
    logger.info("已生成示例模板：%s", pdf_path)
    return pdf_path


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PDF 名字叠加工具（自订字体 + 多行居中）")
    parser.add_argument("--name", type=str, default=None, help="要写入的名字")
    parser.add_argument("--template", type=Path, default=PATH_DEFAULT_TEMPLATE_PDF, help="模板 PDF 路径")
    parser.add_argument("--font", type=Path, default=None, help="TrueType 字体文件（.ttf）；省略时自动探测")
    parser.add_argument("--output", type=Path, default=None, help="输出 PDF 路径（省略时为 output/給{名字}的禮物.pdf）")
    parser.add_argument("--config", type=Path, default=None, help="版式配置 JSON（默认 config/layout.json）")
    parser.add_argument("--engine", type=str, choices=list(CONST_ENGINES), default=CONST_ENGINE_DEFAULT, help="绘制引擎：pymupdf/reportlab/raster")
    parser.add_argument("--batch-json", dest="batch_json", type=Path, default=None, help="批量 JSON：名字数组或包含 names 数组的对象")
    parser.add_argument("--batch-csv", dest="batch_csv", type=Path, default=None, help="批量 CSV：name 列或第一列")
    parser.add_argument("--batch-output-dir", dest="batch_output_dir", type=Path, default=None, help="批量输出目录（默认 output/）")
    parser.add_argument("--dry-run", dest="dry_run", action="store_true", help="只输出分行与坐标，不写 PDF")
    parser.add_argument("--make-example", action="store_true", help="若示例模板不存在则生成一份")
    return parser.parse_args(argv)


def _build_processor(args: argparse.Namespace) -> NameOverlayProcessor:
    font_path = pick_font_file(args.font)
    if font_path is None:
        raise SystemExit(f"[{ERR_FONT_LOAD_FAILED}] 找不到可用字体，请用 --font 指定 TrueType（.ttf）文件")
    logger.info("使用字体：%s", font_path)
    overrides = load_layout_config(args.config)
    return NameOverlayProcessor(FontCache.from_path(font_path), layout_overrides=overrides, engine=args.engine)


def _collect_batch_names(args: argparse.Namespace) -> List[str]:
    names: List[str] = []
    if args.batch_json:
        names.extend(load_names_json(args.batch_json))
    if args.batch_csv:
        names.extend(load_names_csv(args.batch_csv))
    return names


def run(args: argparse.Namespace) -> int:
    if args.make_example:
        pdf_path = _ensure_example_pdf()
        print(f"示例模板已就绪：{pdf_path}")
        return 0

    template: Path = args.template
    if not template.exists() and template == PATH_DEFAULT_TEMPLATE_PDF:
        logger.warning("模板不存在：%s，将生成示例模板以便测试。", template)
        template = _ensure_example_pdf()

    processor = _build_processor(args)

    # 批量模式优先
    if args.batch_json or args.batch_csv:
        if args.output is not None:
            logger.warning("批量模式下将忽略 --output，改用按名字自动生成多个输出文件")
        names = _collect_batch_names(args)
        if not names:
            raise SystemExit("未从批量数据中解析到任何名字")
        outputs: List[Path] = []
        for i, name in enumerate(names, start=1):
            out = processor.generate_to_file(name, template, output_dir=args.batch_output_dir)
            logger.info("第 %s/%s 份完成：%s", i, len(names), out)
            outputs.append(out)
        print("批量生成完成，共 {} 个文件：".format(len(outputs)))
        for p in outputs:
            print(f" - {p}")
        return 0

    if args.dry_run:
        page_w, page_h = read_page_size(FileHandler.read_bytes(template))
        for line in processor.plan(args.name, page_w, page_h):
            print(f"{line.text}\tx={line.x:.2f}\ty={line.y:.2f}\twidth={line.width:.2f}")
        return 0

    out = processor.generate_to_file(args.name, template, output_path=args.output)
    print(f"PDF 已产生！檔案名稱：{out.name}")
    print(f"保存至：{out}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    _log_runtime_capabilities()
    args = parse_args(argv)
    try:
        code = run(args)
    except (NameOverlayError, FileNotFoundError) as exc:
        logger.error("PDF 生成失败：%s", exc)
        print(f"產生 PDF 時發生錯誤：{exc}", file=sys.stderr)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
