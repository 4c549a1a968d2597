"""Word 内容控件."""

from typing import List, Optional

from loguru import logger

from word_templater.data.content_replacer import ContentReplacer
from word_templater.data.errors import EmptyRegionError, MalformedTemplateError
from word_templater.data.oxml import W_ALIAS, W_SDT_CONTENT, W_SDT_PR, W_T, W_TAG, W_TR, W_VAL


class ContentControl:
    """文档中的一个内容控件（w:sdt）.

    持有控件名称和控件的 w:sdtContent 子树，替换直接作用于该子树。
    """

    def __init__(self, key: str, content) -> None:
        """初始化内容控件.

        Args:
            key: 模板作者声明的控件名称
            content: 控件的 w:sdtContent 元素
        """
        self.key = key
        self.content = content

    @classmethod
    def from_sdt(cls, sdt) -> "ContentControl":
        """从 w:sdt 元素创建内容控件.

        名称优先取 w:alias，没有时使用 w:tag。

        Raises:
            MalformedTemplateError: 缺少名称或 w:sdtContent
        """
        sdt_pr = sdt.find(W_SDT_PR)
        key = cls._find_key(sdt_pr) if sdt_pr is not None else None
        if not key:
            raise MalformedTemplateError("内容控件缺少名称（w:alias 或 w:tag）")

        content = sdt.find(W_SDT_CONTENT)
        if content is None:
            raise MalformedTemplateError(f"内容控件 '{key}' 缺少 w:sdtContent")

        return cls(key, content)

    @staticmethod
    def _find_key(sdt_pr) -> Optional[str]:
        for tag in (W_ALIAS, W_TAG):
            element = sdt_pr.find(tag)
            if element is not None and element.get(W_VAL):
                return element.get(W_VAL)
        return None

    def replace_content(self, content_replacer: ContentReplacer) -> None:
        try:
            content_replacer.replace_content(self.content)
        except EmptyRegionError:
            logger.error(f"内容控件 '{self.key}' 中没有文本节点")
            raise

    def get_text_value(self) -> str:
        """获取控件中所有文本节点拼接后的文本."""
        return "".join(t.text or "" for t in self.content.iter(W_T))

    def get_table_values(self) -> List[List[str]]:
        """按行获取控件中表格的文本."""
        return [[t.text or "" for t in row.iter(W_T)] for row in self.content.iter(W_TR)]

    def __repr__(self) -> str:
        return f"ContentControl(key='{self.key}', text='{self.get_text_value()}')"
