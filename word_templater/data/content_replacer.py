"""内容控件替换策略."""

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import List, Sequence

from loguru import logger

from word_templater.data.errors import EmptyRegionError, MalformedTemplateError
from word_templater.data.oxml import W_P, W_T, W_TBL, W_TC, W_TR, append_text_run, set_text


class ContentReplacer(ABC):
    """内容替换器基类."""

    @abstractmethod
    def replace_content(self, sdt_content) -> None:
        """用替换值改写内容控件的 w:sdtContent 子树.

        Args:
            sdt_content: 内容控件的 w:sdtContent 元素，原地修改
        """
        pass


def _replace_texts(container, value: str) -> bool:
    """保留第一个 w:t 写入新值，删除其余 w:t；没有 w:t 时返回 False."""
    texts = list(container.iter(W_T))
    if not texts:
        return False

    # Word 编辑时常按字符格式把一段文字拆成多个 run，合并为一个
    for extra in texts[1:]:
        extra.getparent().remove(extra)

    set_text(texts[0], value)
    return True


def _table_rows(table) -> list:
    """表格自身的所有行（含行级内容控件中的行），不含嵌套表格的行."""
    return [row for row in table.iter(W_TR) if next(row.iterancestors(W_TBL)) is table]


class SingleLineContentReplacer(ContentReplacer):
    """单行文本替换器."""

    def __init__(self, text: str) -> None:
        self.text = text

    def replace_content(self, sdt_content) -> None:
        """替换内容控件中的文本.

        Raises:
            EmptyRegionError: 内容控件中没有文本节点
        """
        if not _replace_texts(sdt_content, self.text):
            raise EmptyRegionError(f"内容控件中没有文本节点，无法写入: '{self.text}'")

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SingleLineContentReplacer(text='{self.text}')"


class TableContentReplacer(ContentReplacer):
    """表格替换器.

    以表头之后的第一行作为行模板，删除所有数据行后按值逐行复制模板行并填写单元格。
    """

    def __init__(self, rows: Sequence[Sequence[str]], header_rows: int = 1) -> None:
        """初始化表格替换器.

        Args:
            rows: 每行的单元格文本
            header_rows: 保留不动的表头行数
        """
        self.rows: List[List[str]] = [list(row) for row in rows]
        self.header_rows = header_rows

    def replace_content(self, sdt_content) -> None:
        """用数据行重建内容控件中的第一个表格.

        Raises:
            MalformedTemplateError: 内容控件中没有表格，或表格没有可作为模板的数据行
        """
        table = next(sdt_content.iter(W_TBL), None)
        if table is None:
            raise MalformedTemplateError("内容控件中没有表格")

        table_rows = _table_rows(table)
        if len(table_rows) <= self.header_rows:
            raise MalformedTemplateError(f"表格只有 {len(table_rows)} 行，缺少模板行")

        row_template = table_rows[self.header_rows]
        # 行可能包在行级内容控件中，新行追加到模板行所在的容器
        container = row_template.getparent()
        for row in table_rows[self.header_rows:]:
            row.getparent().remove(row)

        for values in self.rows:
            new_row = deepcopy(row_template)
            cells = new_row.findall(W_TC)
            if len(values) > len(cells):
                logger.warning(f"表格行有 {len(values)} 个值，但只有 {len(cells)} 个单元格，多余的值被忽略")
            for cell, value in zip(cells, values):
                self._fill_cell(cell, value)
            # 模板行多于值的单元格清空
            for cell in cells[len(values):]:
                self._fill_cell(cell, "")
            container.append(new_row)

        logger.debug(f"表格已填充 {len(self.rows)} 行")

    @staticmethod
    def _fill_cell(cell, value: str) -> None:
        if _replace_texts(cell, value):
            return
        # 空单元格：在第一个段落中新建文本
        paragraph = cell.find(W_P)
        if paragraph is None:
            raise MalformedTemplateError("表格单元格中没有段落")
        if value:
            append_text_run(paragraph, value)

    def __repr__(self) -> str:
        return f"TableContentReplacer(rows={len(self.rows)}, header_rows={self.header_rows})"
