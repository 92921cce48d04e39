"""
文件路径：name_overlay/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关（字号、行高、颜色、边距）
  - CONST_：通用常量
  - ERR_：错误码

使用说明：
- 业务模块不定义新的全局变量，必须从本模块导入所需常量。
- 目录路径均使用 pathlib.Path 对象表示，使用时如需字符串请显式 str() 转换。
"""

from pathlib import Path
from typing import Optional, Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

# 各功能目录
PATH_CONFIG_DIR: Path = PATH_ROOT / "config"
PATH_EXAMPLES_DIR: Path = PATH_ROOT / "examples"
PATH_TEMP_DIR: Path = PATH_ROOT / "temp"
PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"
PATH_FONTS_DIR: Path = PATH_CONFIG_DIR / "fonts"

# 关键文件路径
PATH_LAYOUT_JSON: Path = PATH_CONFIG_DIR / "layout.json"  # 版式覆盖配置（可选）
PATH_DEFAULT_TEMPLATE_PDF: Path = PATH_EXAMPLES_DIR / "Cat.pdf"  # 默认模板
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志

# 字体文件（需为可嵌入的 TrueType 字体，不支持 CFF 轮廓）
PATH_FONT_FILE: Optional[Path] = PATH_FONTS_DIR / "ChenYuluoyan-Thin-Monospaced.ttf"


# =============================
# 样式（STYLE_）
# =============================
STYLE_FONT_FACE_NAME: str = "NameOverlayFont"  # 在 ReportLab/PyMuPDF 中注册的字体名
STYLE_FONT_SIZE_DEFAULT: float = 120.0  # 字号（pt）
STYLE_LINE_HEIGHT_DEFAULT: float = 1.4  # 行高倍数，行距 = 字号 * 倍数
STYLE_TOP_MARGIN_DEFAULT: float = 180.0  # 单行文本顶部到页面顶边的距离（pt）
STYLE_MARGIN_X_DEFAULT: float = 30.0  # 左右各自的水平边距（pt）
STYLE_TEXT_COLOR_RGB: Tuple[float, float, float] = (1.0, 0.98, 0.94)  # 米白色，分量取值 [0, 1]


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码
CONST_TARGET_PAGE_INDEX: int = 0  # 名字写入的页面（0 基）
CONST_MAX_RETRY: int = 2  # 通用重试次数，仅用于文件 IO
CONST_RASTER_SCALE: float = 2.0  # 光栅渲染比例，2.0 即 2x 清晰度
CONST_OUTPUT_NAME_TEMPLATE: str = "給{name}的禮物.pdf"  # 输出文件名模板
CONST_FILENAME_FORBIDDEN_CHARS: str = '\\/:*?"<>|'  # 文件名中需替换的字符
CONST_ENGINE_PYMUPDF: str = "pymupdf"
CONST_ENGINE_REPORTLAB: str = "reportlab"
CONST_ENGINE_RASTER: str = "raster"
CONST_ENGINE_DEFAULT: str = CONST_ENGINE_PYMUPDF
CONST_ENGINES: Tuple[str, ...] = (CONST_ENGINE_PYMUPDF, CONST_ENGINE_REPORTLAB, CONST_ENGINE_RASTER)

# 版式配置 JSON 中允许出现的键
CONST_LAYOUT_CONFIG_KEYS: Tuple[str, ...] = (
    "font_size",
    "line_height",
    "top_margin",
    "margin_x",
    "text_color",
)

# 常见中文字体候选路径（自动探测，按顺序优先）
CONST_CANDIDATE_CJK_FONT_PATHS: Tuple[str, ...] = (
    # Windows 常见字体
    "C:/Windows/Fonts/simhei.ttf",
    "C:/Windows/Fonts/msjh.ttf",
    # macOS 常见字体
    "/System/Library/Fonts/STSong.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    # Linux 常见字体
    "/usr/share/fonts/truetype/droid/DroidSansFallbackFull.ttf",
    "/usr/share/fonts/truetype/arphic-gbsn00lp/gbsn00lp.ttf",
)

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_INVALID_PDF: int = 1002  # 非法或损坏的 PDF 文件
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写
ERR_FONT_LOAD_FAILED: int = 1004  # 字体文件无法载入

# 2xxx：版式相关
ERR_INVALID_PARAMETER: int = 2001  # 字号/行宽等几何参数非法

# 3xxx：写入相关
ERR_PDF_WRITE_FAILED: int = 3002  # PDF 写入失败

# 4xxx：配置/数据相关
ERR_CONFIG_LOAD_FAILED: int = 4001  # 配置加载失败
ERR_NAME_EMPTY: int = 4002  # 名字为空


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_CONFIG_DIR",
    "PATH_EXAMPLES_DIR",
    "PATH_TEMP_DIR",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_FONTS_DIR",
    "PATH_LAYOUT_JSON",
    "PATH_DEFAULT_TEMPLATE_PDF",
    "PATH_LOG_FILE",
    "PATH_FONT_FILE",
    # STYLE_
    "STYLE_FONT_FACE_NAME",
    "STYLE_FONT_SIZE_DEFAULT",
    "STYLE_LINE_HEIGHT_DEFAULT",
    "STYLE_TOP_MARGIN_DEFAULT",
    "STYLE_MARGIN_X_DEFAULT",
    "STYLE_TEXT_COLOR_RGB",
    # CONST_
    "CONST_ENCODING",
    "CONST_TARGET_PAGE_INDEX",
    "CONST_MAX_RETRY",
    "CONST_RASTER_SCALE",
    "CONST_OUTPUT_NAME_TEMPLATE",
    "CONST_FILENAME_FORBIDDEN_CHARS",
    "CONST_ENGINE_PYMUPDF",
    "CONST_ENGINE_REPORTLAB",
    "CONST_ENGINE_RASTER",
    "CONST_ENGINE_DEFAULT",
    "CONST_ENGINES",
    "CONST_LAYOUT_CONFIG_KEYS",
    "CONST_CANDIDATE_CJK_FONT_PATHS",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_INVALID_PDF",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_FONT_LOAD_FAILED",
    "ERR_INVALID_PARAMETER",
    "ERR_PDF_WRITE_FAILED",
    "ERR_CONFIG_LOAD_FAILED",
    "ERR_NAME_EMPTY",
]
