"""显示格式工具."""

from decimal import Decimal
from typing import Optional

from babel.numbers import format_currency as babel_format_currency

from word_templater.config.settings import settings


def format_currency(amount: Decimal, currency: Optional[str] = None, locale: Optional[str] = None) -> str:
    """按区域设置格式化金额.

    Args:
        amount: 金额，符号原样保留
        currency: 货币代码，默认使用配置
        locale: 区域设置，默认使用配置

    Returns:
        货币字符串，例如 en_US 下的 "$1,234.50"
    """
    return babel_format_currency(
        amount,
        currency or settings.format.currency,
        locale=locale or settings.format.locale,
    )
