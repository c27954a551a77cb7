"""
工具模块包
提供项目所需的通用工具和功能
"""

from .config_manager import config_manager, UnifiedConfigManager, AppConfig, ApiConfig, LoggingConfig
from .exceptions import (
    QuoteSystemError,
    ConfigurationError,
    DataLoadError,
    ValidationError,
    NotFoundError,
    QuoteNotFoundError,
    CategoryNotFoundError,
    EmptyStoreError,
    ErrorCodes,
    create_error_response
)
from .logging_manager import (
    LogContext,
    log_execution,
    logging_manager,
    logger,
    LogConfig,
    initialize_logging,
    ModuleLoggers,
    api_logger,
    store_logger,
    config_logger,
    main_logger
)
from .path_utils import BASE_DIR, CONFIG_DIR, resolve_path

__version__ = "1.0.0"

__all__ = [
    # 配置管理
    "config_manager",
    "UnifiedConfigManager",
    "AppConfig",
    "ApiConfig",
    "LoggingConfig",

    # 异常处理
    "QuoteSystemError",
    "ConfigurationError",
    "DataLoadError",
    "ValidationError",
    "NotFoundError",
    "QuoteNotFoundError",
    "CategoryNotFoundError",
    "EmptyStoreError",
    "ErrorCodes",
    "create_error_response",

    # 日志工具
    "LogContext",
    "log_execution",
    "logging_manager",
    "logger",
    "LogConfig",
    "initialize_logging",
    "ModuleLoggers",
    "api_logger",
    "store_logger",
    "config_logger",
    "main_logger",

    # 路径工具
    "BASE_DIR",
    "CONFIG_DIR",
    "resolve_path",
]
