"""WordprocessingML 元素名称常量与文本节点工具."""

from docx.oxml import OxmlElement
from docx.oxml.ns import qn

# =============================================================================
# XML 名称常量
# =============================================================================

W_SDT = qn("w:sdt")
W_SDT_PR = qn("w:sdtPr")
W_SDT_CONTENT = qn("w:sdtContent")
W_ALIAS = qn("w:alias")
W_TAG = qn("w:tag")
W_VAL = qn("w:val")
W_P = qn("w:p")
W_R = qn("w:r")
W_T = qn("w:t")
W_TBL = qn("w:tbl")
W_TR = qn("w:tr")
W_TC = qn("w:tc")

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


def set_text(t_element, value: str) -> None:
    """设置 w:t 的文本，首尾有空白时标记 xml:space="preserve"."""
    t_element.text = value
    if value != value.strip():
        t_element.set(XML_SPACE, "preserve")
    elif XML_SPACE in t_element.attrib:
        del t_element.attrib[XML_SPACE]


def append_text_run(paragraph, value: str):
    """在段落末尾追加一个只含文本的 w:r，返回新的 w:t."""
    run = OxmlElement("w:r")
    text = OxmlElement("w:t")
    set_text(text, value)
    run.append(text)
    paragraph.append(run)
    return text
