"""
文件路径：name_overlay/__init__.py

说明：PDF 名字叠加工具。
- components：日志、文件、坐标、字体与分行等通用组件；
- processors：版式定位与三种绘制引擎；
- overlay_processor：单次生成请求的门面；
- data_handler：名字清洗、版式配置与批量名字读取。
"""

__version__ = "0.1.0"
