"""
统一异常定义模块
Project-specific exceptions for the quote service and their HTTP mapping data.
"""

from typing import Optional, Dict, Any


class QuoteSystemError(Exception):
    """语录服务基础异常类"""

    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(QuoteSystemError):
    """配置相关错误"""
    pass


class DataLoadError(QuoteSystemError):
    """语录数据文件加载错误"""
    pass


class ValidationError(QuoteSystemError):
    """数据验证错误"""

    status_code = 400


class NotFoundError(QuoteSystemError):
    """资源不存在"""

    status_code = 404


class QuoteNotFoundError(NotFoundError):
    """指定ID的语录不存在"""

    def __init__(self, quote_id: Optional[int]):
        super().__init__(
            "Quote not found",
            ErrorCodes.QUOTE_NOT_FOUND,
            context={"id": quote_id}
        )
        self.quote_id = quote_id


class CategoryNotFoundError(NotFoundError):
    """分类下没有语录"""

    def __init__(self, category: str):
        super().__init__(
            "No quotes found for this category",
            ErrorCodes.CATEGORY_NOT_FOUND,
            context={"category": category}
        )
        self.category = category


class EmptyStoreError(NotFoundError):
    """存储为空，无法随机选取"""

    def __init__(self):
        super().__init__("No quotes available", ErrorCodes.STORE_EMPTY)


# 错误代码常量
class ErrorCodes:
    """错误代码常量"""

    # 配置错误
    CONFIG_NOT_FOUND = "CONFIG_001"
    CONFIG_INVALID_FORMAT = "CONFIG_002"
    CONFIG_LOAD_ERROR = "CONFIG_003"

    # 数据加载错误
    DATA_FILE_NOT_FOUND = "DATA_001"
    DATA_INVALID_FORMAT = "DATA_002"
    DATA_DUPLICATE_ID = "DATA_003"

    # 查询错误
    QUOTE_NOT_FOUND = "QUOTE_001"
    CATEGORY_NOT_FOUND = "QUOTE_002"
    STORE_EMPTY = "QUOTE_003"

    # 验证错误
    VALIDATION_MISSING_REQUIRED_FIELD = "VAL_001"
    VALIDATION_INVALID_BODY = "VAL_002"


def create_error_response(error: QuoteSystemError) -> Dict[str, Any]:
    """创建对外的错误响应体: {error, ...context}"""
    response = {"error": error.message}
    if isinstance(error, NotFoundError):
        response.update(error.context)
    return response
