"""数据处理模块."""

"""
word_templater/data/
├── __init__.py
├── errors.py              # 异常定义
├── models.py              # 数据模型定义
├── oxml.py                # WordprocessingML 名称常量
├── content_replacer.py    # 内容替换策略
├── content_control.py     # 内容控件
├── document_merger.py     # 内容控件合并
├── document_io.py         # 文档读写操作
└── record_loader.py       # 员工表格加载
"""
