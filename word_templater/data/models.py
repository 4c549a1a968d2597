"""数据模型定义."""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from word_templater.utils.formatting import format_currency

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOCX_EXTENSION = "docx"


class Employee(BaseModel):
    """员工记录，加载后不可修改."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(default="", description="名字")
    last_name: str = Field(default="", description="姓氏")
    salary: Decimal = Field(..., description="加薪金额")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def salary_format(self) -> str:
        """按配置的区域设置格式化的加薪金额."""
        return format_currency(self.salary)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class GeneratedDocument:
    """生成的文档."""

    document: bytes
    file_name: str

    @property
    def mime_type(self) -> str:
        return DOCX_MIME_TYPE

    @property
    def extension(self) -> str:
        return DOCX_EXTENSION

    def __repr__(self) -> str:
        return f"GeneratedDocument(file_name='{self.file_name}', size={len(self.document)})"
