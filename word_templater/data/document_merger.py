"""内容控件合并引擎."""

from io import BytesIO
from typing import List, Mapping, Optional, Set
from zipfile import BadZipFile

from docx import Document
from docx.opc.constants import CONTENT_TYPE as CT
from docx.opc.exceptions import PackageNotFoundError
from docx.opc.oxml import serialize_part_xml
from docx.opc.part import XmlPart
from docx.oxml import parse_xml
from loguru import logger
from lxml import etree

from word_templater.data.content_control import ContentControl
from word_templater.data.content_replacer import ContentReplacer
from word_templater.data.errors import MalformedTemplateError
from word_templater.data.oxml import W_SDT, W_SDT_CONTENT

# 可能包含内容控件的部件
CONTENT_PART_TYPES = (
    CT.WML_DOCUMENT_MAIN,
    CT.WML_HEADER,
    CT.WML_FOOTER,
    CT.WML_FOOTNOTES,
    CT.WML_ENDNOTES,
    CT.WML_COMMENTS,
)


class ContentPart:
    """文档包中的一个内容部件及其 XML 树.

    python-docx 没有为脚注、尾注等部件提供 XmlPart，这类部件从二进制解析，
    修改后需要写回。
    """

    def __init__(self, part) -> None:
        self.part = part
        if isinstance(part, XmlPart):
            self.element = part._element
        else:
            try:
                self.element = parse_xml(part.blob)
            except etree.XMLSyntaxError as e:
                logger.error(f"无法解析部件 {part.partname}: {e}")
                raise MalformedTemplateError(f"无法解析部件 {part.partname}: {e}") from e

    def flush(self) -> None:
        if not isinstance(self.part, XmlPart):
            self.part._blob = serialize_part_xml(self.element)

    def __repr__(self) -> str:
        return f"ContentPart(partname='{self.part.partname}')"


class DocumentMerger:
    """内容控件合并器."""

    def scan(self, document: bytes) -> List[ContentControl]:
        """查找文档中的所有内容控件.

        按部件顺序和文档顺序返回，重复的名称各自成为一个控件。

        Args:
            document: docx 文档内容

        Returns:
            内容控件列表

        Raises:
            MalformedTemplateError: 文件不是Word文档，或内容控件缺少名称或内容
        """
        word_document = self._open(document)
        content_controls = self._find_content_controls(self._content_parts(word_document))
        logger.debug(f"找到 {len(content_controls)} 个内容控件: {[cc.key for cc in content_controls]}")
        return content_controls

    def get_content_fields(self, document: bytes) -> List[str]:
        """获取文档中所有内容控件的名称."""
        return [content_control.key for content_control in self.scan(document)]

    def merge(self, document: bytes, content_replacers: Mapping[str, Optional[ContentReplacer]]) -> bytes:
        """把替换器应用到同名的内容控件上并返回新文档.

        映射中没有的控件以及替换器为 None 的控件保持不变。输入内容不会被修改。

        Args:
            document: docx 文档内容
            content_replacers: 控件名称到替换器的映射

        Returns:
            合并后的 docx 文档内容
        """
        word_document = self._open(document)
        content_parts = self._content_parts(word_document)
        content_controls = self._find_content_controls(content_parts)

        replaced = set()
        for key, content_replacer in content_replacers.items():
            if content_replacer is None:
                continue
            self._replace(content_controls, key, content_replacer, replaced)

        for content_part in content_parts:
            content_part.flush()

        stream = BytesIO()
        word_document.save(stream)
        logger.debug(f"文档合并完成，共 {len(content_controls)} 个内容控件")
        return stream.getvalue()

    @staticmethod
    def _replace(content_controls: List[ContentControl], key: str, content_replacer: ContentReplacer, replaced: Set) -> None:
        matched = [cc for cc in content_controls if cc.key == key]
        for content_control in matched:
            # 外层控件已被替换时，内层控件的文本已随之合并
            if any(ancestor in replaced for ancestor in content_control.content.iterancestors(W_SDT_CONTENT)):
                logger.debug(f"跳过嵌套在已替换控件中的 '{key}' 内容控件")
                continue
            content_control.replace_content(content_replacer)
            replaced.add(content_control.content)
        if matched:
            logger.debug(f"已替换 {len(matched)} 个 '{key}' 内容控件为 {content_replacer!r}")

    @staticmethod
    def _open(document: bytes):
        try:
            return Document(BytesIO(document))
        except (BadZipFile, PackageNotFoundError, KeyError, ValueError, etree.XMLSyntaxError) as e:
            logger.error(f"无法打开Word文档: {e}")
            raise MalformedTemplateError(f"无法打开Word文档: {e}") from e

    @staticmethod
    def _content_parts(word_document) -> List[ContentPart]:
        return [
            ContentPart(part)
            for part in word_document.part.package.iter_parts()
            if part.content_type in CONTENT_PART_TYPES
        ]

    @staticmethod
    def _find_content_controls(content_parts: List[ContentPart]) -> List[ContentControl]:
        content_controls = []
        for content_part in content_parts:
            for sdt in content_part.element.iter(W_SDT):
                content_controls.append(ContentControl.from_sdt(sdt))
        return content_controls
