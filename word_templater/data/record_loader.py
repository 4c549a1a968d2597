"""员工表格加载."""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from loguru import logger
from openpyxl import load_workbook

from word_templater.config.settings import settings
from word_templater.data.models import Employee


class EmployeeLoader:
    """从 Excel 工作表加载员工记录.

    第一行为表头，按列标题读取名字、姓氏和加薪金额。
    """

    def __init__(
        self,
        first_name_column: Optional[str] = None,
        last_name_column: Optional[str] = None,
        salary_column: Optional[str] = None,
        sheet_name: Optional[str] = None,
    ) -> None:
        self.first_name_column = first_name_column or settings.template.first_name_column
        self.last_name_column = last_name_column or settings.template.last_name_column
        self.salary_column = salary_column or settings.template.salary_column
        self.sheet_name = sheet_name or settings.template.sheet_name

    def load(self, file_path: Union[str, Path]) -> List[Employee]:
        """加载员工记录.

        Args:
            file_path: xlsx 文件路径

        Returns:
            员工记录列表，顺序与表格一致

        Raises:
            FileNotFoundError: 文件不存在
            ValueError: 文件格式不正确、缺少列或金额无法解析
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"文件不存在: {file_path}")

        if file_path.suffix.lower() not in ['.xlsx', '.xlsm']:
            raise ValueError(f"不支持的文件类型: {file_path.suffix}")

        workbook = load_workbook(file_path, read_only=True, data_only=True)
        try:
            worksheet = workbook[self.sheet_name] if self.sheet_name else workbook.active
            rows = worksheet.iter_rows(values_only=True)

            header = next(rows, None)
            if header is None:
                raise ValueError(f"工作表为空: {file_path}")
            columns = self._map_columns(header)

            employees = []
            # 表头是第1行，数据从第2行开始
            for row_number, row in enumerate(rows, 2):
                if all(value is None or str(value).strip() == "" for value in row):
                    continue
                employees.append(self._to_employee(row, columns, row_number))
        finally:
            workbook.close()

        logger.info(f"已从 {file_path} 加载 {len(employees)} 条员工记录")
        return employees

    def _map_columns(self, header: Sequence) -> Dict[str, int]:
        titles = [str(title).strip() if title is not None else "" for title in header]
        columns = {}
        for column in (self.first_name_column, self.last_name_column, self.salary_column):
            if column not in titles:
                raise ValueError(f"表格缺少列: '{column}'，现有列: {titles}")
            columns[column] = titles.index(column)
        return columns

    def _to_employee(self, row: Sequence, columns: Dict[str, int], row_number: int) -> Employee:
        def cell(column: str):
            index = columns[column]
            return row[index] if index < len(row) else None

        salary = cell(self.salary_column)
        if salary is None or str(salary).strip() == "":
            raise ValueError(f"第 {row_number} 行缺少 '{self.salary_column}'")
        try:
            salary = Decimal(str(salary).strip())
        except InvalidOperation:
            raise ValueError(f"第 {row_number} 行的 '{self.salary_column}' 不是数字: {salary}")

        first_name = cell(self.first_name_column)
        last_name = cell(self.last_name_column)
        return Employee(
            first_name=str(first_name).strip() if first_name is not None else "",
            last_name=str(last_name).strip() if last_name is not None else "",
            salary=salary,
        )
