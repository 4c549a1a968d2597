"""批量文档生成应用."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import typer
from loguru import logger

from word_templater.config.settings import settings
from word_templater.data.document_io import DocumentIO
from word_templater.data.record_loader import EmployeeLoader
from word_templater.service.generator import DocumentGenerator


@dataclass
class BatchResult:
    """批处理结果."""

    output_dir: str
    success: bool
    generated: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)
    error_message: Optional[str] = None

    @property
    def report(self) -> str:
        """生成结果报告.

        Returns:
            结果报告字符串
        """
        if not self.success:
            return f"处理失败: {self.error_message}"

        lines = [
            f"处理完成!",
            f"- 生成文档 {len(self.generated)} 份",
            f"- 输出目录: {self.output_dir}",
        ]
        if self.failures:
            lines.append(f"- 失败 {len(self.failures)} 份:")
            lines.extend(f"  - {name}: {error}" for name, error in self.failures.items())
        return "\n".join(lines)


class BatchProcessor:
    """按员工表格批量生成文档."""

    def __init__(self, loader: Optional[EmployeeLoader] = None) -> None:
        self.loader = loader or EmployeeLoader()
        self.document_io = DocumentIO()

    def process(
        self,
        records_path: str,
        template_path: str,
        output_dir: str,
        stop_on_error: bool = False,
    ) -> BatchResult:
        """为表格中的每个员工生成文档并保存.

        Args:
            records_path: 员工表格路径
            template_path: 模板路径
            output_dir: 输出目录，开始前会被清空
            stop_on_error: 单个员工生成失败时是否中止整个批处理

        Returns:
            处理结果
        """
        try:
            logger.info(f"开始批量生成文档，模板: {template_path}")
            employees = self.loader.load(records_path)
            self.document_io.clear_directory(output_dir)
        except Exception as e:
            logger.error(f"批处理准备失败: {e}")
            return BatchResult(output_dir=output_dir, success=False, error_message=str(e))

        generator = DocumentGenerator(template_path=template_path)
        result = BatchResult(output_dir=output_dir, success=True)

        for employee in employees:
            try:
                document = generator.generate(employee)
                saved_path = self.document_io.save_document(document, output_dir)
                result.generated.append(str(saved_path))
            except (ValueError, OSError) as e:
                logger.error(f"为 {employee} 生成文档失败: {e}")
                if stop_on_error:
                    raise
                result.failures[str(employee)] = str(e)

        logger.info(f"批处理完成，成功 {len(result.generated)} 份，失败 {len(result.failures)} 份")
        return result


# 命令行接口
app = typer.Typer()


@app.command()
def generate_documents(
    records_path: str = typer.Argument(None, help="员工表格路径，默认使用配置中的 RECORDS_PATH"),
    template: str = typer.Option(None, help="Word模板路径，默认使用配置中的 TEMPLATE_PATH"),
    output_dir: str = typer.Option(None, help="输出目录，默认使用配置中的 OUTPUT_DIR"),
    stop_on_error: bool = typer.Option(False, help="任一员工生成失败时立即中止"),
) -> None:
    """为表格中的每个员工填充模板内容控件并生成文档."""
    records_path = records_path or str(settings.template.records_path)
    template = template or str(settings.template.template_path)
    output_dir = output_dir or str(settings.output_dir)

    processor = BatchProcessor()
    result = processor.process(records_path, template, output_dir, stop_on_error=stop_on_error)

    if result.success:
        typer.echo(typer.style(result.report, fg=typer.colors.GREEN))
        typer.echo("Document Generation Complete")
    else:
        typer.echo(typer.style(result.report, fg=typer.colors.RED))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
