"""项目配置设置."""

from dotenv import load_dotenv
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

# 先加载.env.example（最低优先级），再加载.env（覆盖前者），最后环境变量最高
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / '.env.example', override=False)
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / '.env', override=True)

_PROJECT_DIR = Path(__file__).parent.parent.parent


class TemplateConfig(BaseModel):
    """模板与数据源配置."""

    template_path: Path = Field(default_factory=lambda: Path(os.environ.get("TEMPLATE_PATH", str(_PROJECT_DIR / "resources" / "EmployeeTemplate.docx"))))  # 模板文档路径
    records_path: Path = Field(default_factory=lambda: Path(os.environ.get("RECORDS_PATH", str(_PROJECT_DIR / "resources" / "Employees.xlsx"))))  # 员工表格路径
    sheet_name: Optional[str] = Field(default_factory=lambda: os.environ.get("SHEET_NAME") or None)  # 工作表名称，为空时使用活动工作表
    first_name_column: str = Field(default_factory=lambda: os.environ.get("FIRST_NAME_COLUMN", "First Name"))  # 名字列标题
    last_name_column: str = Field(default_factory=lambda: os.environ.get("LAST_NAME_COLUMN", "Last Name"))  # 姓氏列标题
    salary_column: str = Field(default_factory=lambda: os.environ.get("SALARY_COLUMN", "Salary Raise"))  # 加薪金额列标题


class FormatConfig(BaseModel):
    """输出格式配置."""

    locale: str = Field(default_factory=lambda: os.environ.get("FORMAT_LOCALE", "en_US"))  # 货币格式使用的区域设置
    currency: str = Field(default_factory=lambda: os.environ.get("CURRENCY", "USD"))  # 货币代码
    date_format: str = Field(default_factory=lambda: os.environ.get("DATE_FORMAT", "%Y-%m-%d"))  # 输出文件名中的日期格式


class LogConfig(BaseModel):
    """日志配置."""

    level: str = Field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))  # 日志级别
    # 精简日志格式
    format: str = Field(default_factory=lambda: os.environ.get("LOG_FORMAT", "<level>{level: <8}</level>| - <level>{message}</level>"))
    log_file: Optional[str] = Field(default_factory=lambda: os.environ.get("LOG_FILE", "word_templater.log"))  # 日志文件名
    # 日志不能放在输出目录中，批处理开始时会清空输出目录
    log_dir: Path = Field(default_factory=lambda: Path(os.environ.get("LOG_DIR", str(_PROJECT_DIR / "logs"))))  # 日志目录
    rotation: str = Field(default_factory=lambda: os.environ.get("LOG_ROTATION", "10 MB"))  # 日志轮转大小
    retention: str = Field(default_factory=lambda: os.environ.get("LOG_RETENTION", "1 week"))  # 日志保留时间


class Settings(BaseModel):
    """项目全局设置."""

    template: TemplateConfig = Field(default_factory=TemplateConfig)  # 模板与数据源配置
    format: FormatConfig = Field(default_factory=FormatConfig)  # 输出格式配置
    log: LogConfig = Field(default_factory=LogConfig)  # 日志相关配置

    # 项目路径配置
    project_dir: Path = Field(default_factory=lambda: _PROJECT_DIR)  # 项目根目录
    output_dir: Path = Field(default_factory=lambda: Path(os.environ.get("OUTPUT_DIR", str(_PROJECT_DIR / "documents"))))  # 生成文档的输出目录


# 单例模式，避免多次实例化
_settings = None
def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

settings = get_settings()
