"""模板合并异常定义."""


class TemplateError(ValueError):
    """模板生成过程中的错误基类."""


class MalformedTemplateError(TemplateError):
    """模板结构不合法.

    内容控件缺少名称或内容元素，或者文件不是Word文档。
    """


class EmptyRegionError(MalformedTemplateError):
    """内容控件中没有任何文本节点，无法写入替换值."""


class UnknownPlaceholderError(TemplateError):
    """模板中声明了没有对应解析函数的占位符."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"未知的占位符: {key}")
