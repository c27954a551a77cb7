"""
Input validation utilities for the quote service.
Lenient coercion of query/path values and presence checks for new quotes.
"""

import re
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError, ErrorCodes

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


class QueryValidator:
    """查询参数验证器"""

    @staticmethod
    def parse_int(value: Any) -> Optional[int]:
        """按整数前缀解析，例如 "2.7" -> 2, "3abc" -> 3，无法解析时返回 None"""
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value)

        match = _LEADING_INT.match(str(value))
        if not match:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # 超出整数字符串转换位数上限
            return None

    @staticmethod
    def positive_int(value: Any, default: int) -> int:
        """缺失、非法或非正数时回退到默认值"""
        parsed = QueryValidator.parse_int(value)
        if parsed is None or parsed <= 0:
            return default
        return parsed


class DataValidator:
    """新增语录数据验证器"""

    REQUIRED_FIELDS = ('text', 'author')

    @staticmethod
    def is_present(value: Any) -> bool:
        """None 和空字符串视为缺失"""
        return value is not None and value != ""

    @classmethod
    def missing_fields(cls, data: Dict[str, Any]) -> List[str]:
        return [name for name in cls.REQUIRED_FIELDS if not cls.is_present(data.get(name))]

    @classmethod
    def validate_new_quote(cls, data: Dict[str, Any]) -> None:
        """校验新增语录的必填字段"""
        missing = cls.missing_fields(data)
        if missing:
            raise ValidationError(
                "Text and author are required",
                ErrorCodes.VALIDATION_MISSING_REQUIRED_FIELD,
                context={"missing_fields": missing}
            )
