"""批量生成测试."""

from decimal import Decimal
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from word_templater.app.processor import BatchProcessor, BatchResult, app
from word_templater.data.errors import UnknownPlaceholderError
from word_templater.data.models import Employee

HEADER = ("First Name", "Last Name", "Salary Raise")


@pytest.fixture
def processor():
    """批处理器实例."""
    return BatchProcessor()


@pytest.fixture
def records_path(make_workbook):
    return make_workbook([HEADER, ("Jane", "Doe", 500), ("John", "Smith", 1234.5)])


def test_process_success(processor, records_path, template_path, tmp_path):
    """测试处理成功的情况."""
    output_dir = tmp_path / "documents"
    output_dir.mkdir()
    (output_dir / "stale.docx").write_bytes(b"old")

    result = processor.process(str(records_path), str(template_path), str(output_dir))

    assert result.success is True
    assert len(result.generated) == 2
    assert result.failures == {}
    names = sorted(path.name for path in output_dir.iterdir())
    assert len(names) == 2
    assert names[0].startswith("Jane Doe-") and names[0].endswith(".docx")
    assert names[1].startswith("John Smith-")


@patch("word_templater.data.record_loader.EmployeeLoader.load")
def test_process_error(mock_load, processor, tmp_path):
    """测试加载失败的情况."""
    mock_load.side_effect = ValueError("测试错误")

    result = processor.process("employees.xlsx", "template.docx", str(tmp_path))

    assert result.success is False
    assert result.error_message == "测试错误"
    assert result.report == "处理失败: 测试错误"


@patch("word_templater.service.generator.DocumentGenerator.generate")
@patch("word_templater.data.record_loader.EmployeeLoader.load")
def test_process_continues_after_failure(mock_load, mock_generate, processor, tmp_path):
    """测试单个员工失败时继续处理."""
    mock_load.return_value = [Employee(first_name="Jane", last_name="Doe", salary=Decimal("1"))]
    mock_generate.side_effect = UnknownPlaceholderError("ManagerName")

    result = processor.process("employees.xlsx", "template.docx", str(tmp_path))

    assert result.success is True
    assert result.generated == []
    assert result.failures == {"Jane Doe": "未知的占位符: ManagerName"}
    assert "失败 1 份" in result.report


@patch("word_templater.service.generator.DocumentGenerator.generate")
@patch("word_templater.data.record_loader.EmployeeLoader.load")
def test_process_stop_on_error(mock_load, mock_generate, processor, tmp_path):
    mock_load.return_value = [Employee(first_name="Jane", last_name="Doe", salary=Decimal("1"))]
    mock_generate.side_effect = UnknownPlaceholderError("ManagerName")

    with pytest.raises(UnknownPlaceholderError):
        processor.process("employees.xlsx", "template.docx", str(tmp_path), stop_on_error=True)


def test_batch_result_report():
    result = BatchResult(output_dir="documents", success=True, generated=["documents/a.docx"])

    assert "生成文档 1 份" in result.report
    assert "documents" in result.report


def test_cli(records_path, template_path, tmp_path):
    output_dir = tmp_path / "out"

    result = CliRunner().invoke(
        app, [str(records_path), "--template", str(template_path), "--output-dir", str(output_dir)]
    )

    assert result.exit_code == 0
    assert "Document Generation Complete" in result.output
    assert len(list(output_dir.iterdir())) == 2


def test_cli_failure(tmp_path, template_path):
    result = CliRunner().invoke(
        app, [str(tmp_path / "missing.xlsx"), "--template", str(template_path), "--output-dir", str(tmp_path)]
    )

    assert result.exit_code == 1


def test_process_corrupt_template(processor, records_path, template_bytes, truncate_part, tmp_path):
    """测试模板损坏时每个员工都记录为失败，批处理正常结束."""
    template = tmp_path / "corrupt.docx"
    template.write_bytes(truncate_part(template_bytes))

    result = processor.process(str(records_path), str(template), str(tmp_path / "documents"))

    assert result.success is True
    assert result.generated == []
    assert set(result.failures) == {"Jane Doe", "John Smith"}
