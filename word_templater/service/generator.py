"""文档生成服务."""

from datetime import date
from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from word_templater.config.settings import settings
from word_templater.data.document_io import DocumentIO
from word_templater.data.document_merger import DocumentMerger
from word_templater.data.models import DOCX_EXTENSION, Employee, GeneratedDocument
from word_templater.service.field_resolver import FieldResolver


class DocumentGenerator:
    """为单个员工生成文档."""

    def __init__(
        self,
        template_path: Optional[Union[str, Path]] = None,
        field_merger: Optional[DocumentMerger] = None,
        field_resolver: Optional[FieldResolver] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """初始化文档生成器.

        Args:
            template_path: 模板路径，默认使用配置
            field_merger: 内容控件合并器
            field_resolver: 占位符解析器
            today: 返回当前日期的函数，用于输出文件名
        """
        self.template_path = Path(template_path or settings.template.template_path)
        self.field_merger = field_merger or DocumentMerger()
        self.field_resolver = field_resolver or FieldResolver()
        self.document_io = DocumentIO()
        self.today = today

    def generate(self, employee: Employee) -> GeneratedDocument:
        """生成员工的文档.

        任一步骤失败都直接抛出异常，不会返回部分生成的文档。

        Args:
            employee: 员工记录

        Returns:
            生成的文档

        Raises:
            UnknownPlaceholderError: 模板中有无法解析的占位符
            MalformedTemplateError: 模板结构不合法
        """
        template = self.document_io.load_template(self.template_path)

        content_controls = self.field_merger.scan(template)
        keys = list(dict.fromkeys(cc.key for cc in content_controls))
        content_replacers = self.field_resolver.resolve_all(keys, employee)

        document = self.field_merger.merge(template, content_replacers)
        file_name = self.document_name(employee)
        logger.info(f"已为 {employee} 生成文档: {file_name}")
        return GeneratedDocument(document=document, file_name=file_name)

    def document_name(self, employee: Employee) -> str:
        return f"{employee.full_name}-{self.today().strftime(settings.format.date_format)}.{DOCX_EXTENSION}"
