"""占位符字段解析服务."""

from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from loguru import logger

from word_templater.data.content_replacer import ContentReplacer, SingleLineContentReplacer
from word_templater.data.errors import UnknownPlaceholderError
from word_templater.data.models import Employee

FieldMapperFunction = Callable[[Employee], ContentReplacer]


class PlaceholderKey(str, Enum):
    """模板中可识别的内容控件名称."""

    EMPLOYEE_NAME = "EmployeeName"
    SALARY_RAISE = "SalaryRaise"


class FieldResolver:
    """把内容控件名称解析为针对某个员工的替换器."""

    def __init__(self) -> None:
        self._field_mapping: Dict[str, FieldMapperFunction] = {
            PlaceholderKey.EMPLOYEE_NAME.value: lambda employee: SingleLineContentReplacer(employee.full_name),
            PlaceholderKey.SALARY_RAISE.value: lambda employee: SingleLineContentReplacer(employee.salary_format),
        }

    @property
    def known_keys(self) -> List[str]:
        return list(self._field_mapping)

    def register(self, key: Union[str, PlaceholderKey], mapper: FieldMapperFunction) -> None:
        """注册新的占位符解析函数，已有的同名函数会被覆盖."""
        key = self._normalize(key)
        if key in self._field_mapping:
            logger.warning(f"覆盖占位符解析函数: {key}")
        self._field_mapping[key] = mapper

    def resolve(self, key: Union[str, PlaceholderKey], employee: Employee) -> ContentReplacer:
        """为员工解析一个占位符.

        Raises:
            UnknownPlaceholderError: 没有该占位符的解析函数
        """
        key = self._normalize(key)
        mapper = self._field_mapping.get(key)
        if mapper is None:
            logger.error(f"模板中的占位符 '{key}' 没有解析函数，可识别的占位符: {self.known_keys}")
            raise UnknownPlaceholderError(key)
        return mapper(employee)

    def resolve_all(self, keys: Iterable[str], employee: Employee) -> Dict[str, ContentReplacer]:
        """为员工解析一组占位符，遇到未知占位符立即失败."""
        return {self._normalize(key): self.resolve(key, employee) for key in keys}

    @staticmethod
    def _normalize(key: Union[str, PlaceholderKey]) -> str:
        return key.value if isinstance(key, PlaceholderKey) else key
