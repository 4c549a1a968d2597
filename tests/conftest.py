"""测试夹具."""

import os
import zipfile
from decimal import Decimal
from io import BytesIO

# 测试时不写日志文件，须在导入 word_templater 之前设置
os.environ["LOG_FILE"] = ""

import pytest
from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from openpyxl import Workbook

from word_templater.data.models import Employee


def _make_element(tag: str, **attribs):
    """创建带 w: 命名空间属性的元素."""
    el = OxmlElement(tag)
    for key, val in attribs.items():
        el.set(qn(f"w:{key}"), str(val))
    return el


def _make_run(text: str, bold: bool = False):
    run = _make_element("w:r")
    if bold:
        r_pr = _make_element("w:rPr")
        r_pr.append(_make_element("w:b"))
        run.append(r_pr)
    t = _make_element("w:t")
    t.text = text
    run.append(t)
    return run


@pytest.fixture
def make_control():
    """创建内联内容控件，每段文本一个 run，第一个 run 加粗."""

    def factory(key, texts=("占位文本",), key_tag="alias", with_content=True):
        sdt = _make_element("w:sdt")
        sdt_pr = _make_element("w:sdtPr")
        if key_tag:
            sdt_pr.append(_make_element(f"w:{key_tag}", val=key))
        sdt_pr.append(_make_element("w:id", val=len(key or "") + 100))
        sdt.append(sdt_pr)
        if with_content:
            content = _make_element("w:sdtContent")
            for i, text in enumerate(texts):
                content.append(_make_run(text, bold=(i == 0)))
            sdt.append(content)
        return sdt

    return factory


@pytest.fixture
def make_row():
    """创建表格行，None 表示空单元格."""

    def factory(*texts):
        tr = _make_element("w:tr")
        for text in texts:
            tc = _make_element("w:tc")
            p = _make_element("w:p")
            if text is not None:
                p.append(_make_run(text))
            tc.append(p)
            tr.append(tc)
        return tr

    return factory


@pytest.fixture
def build_template():
    """把内容控件放进正文段落（以及页眉）生成 docx 内容."""

    def factory(*controls, header_controls=()):
        doc = Document()
        doc.add_paragraph("Employee salary adjustment")
        for control in controls:
            paragraph = doc.add_paragraph("Field: ")
            paragraph._element.append(control)
        for control in header_controls:
            doc.sections[0].header.paragraphs[0]._element.append(control)
        stream = BytesIO()
        doc.save(stream)
        return stream.getvalue()

    return factory


@pytest.fixture
def template_bytes(make_control, build_template):
    """包含 EmployeeName 和 SalaryRaise 的标准模板."""
    return build_template(
        make_control("EmployeeName", ("Employee", " ", "Name")),
        make_control("SalaryRaise", ("$0.00",)),
    )


@pytest.fixture
def truncate_part():
    """截断 docx 包中某个部件的 XML，zip 结构保持有效."""

    def factory(document, part_name="word/document.xml", cut=20):
        stream = BytesIO()
        with zipfile.ZipFile(BytesIO(document)) as source, zipfile.ZipFile(stream, "w") as target:
            for item in source.infolist():
                data = source.read(item.filename)
                if item.filename == part_name:
                    data = data[:-cut]
                target.writestr(item, data)
        return stream.getvalue()

    return factory


@pytest.fixture
def template_path(tmp_path, template_bytes):
    path = tmp_path / "EmployeeTemplate.docx"
    path.write_bytes(template_bytes)
    return path


@pytest.fixture
def employee():
    return Employee(first_name="Jane", last_name="Doe", salary=Decimal("500"))


@pytest.fixture
def make_workbook(tmp_path):
    """把行写入 xlsx 文件，第一行为表头."""

    def factory(rows, name="Employees.xlsx"):
        workbook = Workbook()
        worksheet = workbook.active
        for row in rows:
            worksheet.append(list(row))
        path = tmp_path / name
        workbook.save(path)
        return path

    return factory
