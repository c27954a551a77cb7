"""
统一的配置管理模块
整合底层配置操作和应用层类型安全访问
"""

import json
import logging
import os
from typing import Any, Optional, Dict, List, TypeVar
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigurationError, ErrorCodes
from .path_utils import CONFIG_DIR, ENV_FILE

# 获取配置专用日志器
config_logger = logging.getLogger("Config")

# 为泛型类型定义一个TypeVar
T = TypeVar('T')

# 环境变量覆盖: 环境变量名 -> 点分隔配置路径
# 按顺序应用，QUOTES_ENV 优先于通用的 NODE_ENV
ENV_OVERRIDES = {
    "NODE_ENV": "app_config.environment",
    "QUOTES_ENV": "app_config.environment",
    "QUOTES_DATA_FILE": "app_config.data_file",
    "HOST": "api_config.host",
    "PORT": "api_config.port",
}

# ============================================================================
# 配置数据类型定义
# ============================================================================

@dataclass
class LoggingModuleConfig:
    """模块日志配置"""
    level: str = "INFO"
    enabled: bool = True

@dataclass
class FileLoggingConfig:
    """文件日志配置"""
    enabled: bool = False
    directory: str = "log"
    filename: str = "quotes.log"
    rotation: Optional[Dict[str, Any]] = None

@dataclass
class ConsoleLoggingConfig:
    """控制台日志配置"""
    enabled: bool = True

@dataclass
class LoggingConfig:
    """完整日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file_config: FileLoggingConfig = field(default_factory=FileLoggingConfig)
    console_config: ConsoleLoggingConfig = field(default_factory=ConsoleLoggingConfig)
    modules: Dict[str, LoggingModuleConfig] = field(default_factory=dict)

@dataclass
class AppConfig:
    """应用配置"""
    environment: str = "development"
    data_file: str = "data/quotes.json"
    default_page_size: int = 11
    default_category: str = "general"
    static_dir: str = "public"
    serve_static: bool = True

@dataclass
class ApiConfig:
    """API配置"""
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


# ============================================================================
# 统一配置管理器
# ============================================================================

class UnifiedConfigManager:
    """统一配置管理器 - 整合底层操作和应用层抽象"""

    def __init__(self, config_dir: Optional[str] = None, use_env: bool = True):
        self._config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self._config_data: Dict[str, Any] = {}
        self._use_env = use_env

        # 类型化配置缓存
        self._typed_cache: Dict[str, Any] = {}

        # 初始化配置
        self._load_config()

    def _load_config(self) -> None:
        """加载配置文件"""
        merged_config = {}
        config_logger.info(f"Loading configuration from directory: {self._config_dir}")

        if not self._config_dir.is_dir():
            raise ConfigurationError(
                f"Configuration path is not a directory: {self._config_dir}",
                ErrorCodes.CONFIG_NOT_FOUND
            )

        # 按文件名排序加载，确保加载顺序一致
        config_files = sorted(self._config_dir.glob('*.json'))
        if not config_files:
            raise ConfigurationError(
                f"No configuration files (.json) found in: {self._config_dir}",
                ErrorCodes.CONFIG_NOT_FOUND
            )

        for config_file in config_files:
            if config_file.name == "config.merged.json":
                continue
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_INVALID_FORMAT
                ) from e
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to read configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_LOAD_ERROR
                ) from e
            merged_config.update(data)
            config_logger.debug(f"Loaded and merged: {config_file.name}")

        self._config_data = merged_config
        if self._use_env:
            self._apply_env_overrides()
        config_logger.info(f"Configuration loaded and merged from {len(config_files)} files.")
        # 清除类型化缓存
        self._typed_cache.clear()

    def _apply_env_overrides(self) -> None:
        """用环境变量覆盖配置值（支持 .env 文件）"""
        if ENV_FILE.exists():
            load_dotenv(ENV_FILE)

        for env_name, path in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                self.set_nested(path, value)
                config_logger.debug(f"Override {path} from ${env_name}")

    # ========================================================================
    # 底层访问方法
    # ========================================================================

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        """获取配置值"""
        return self._config_data.get(key, default)

    def get_nested(self, path: str, default: Optional[T] = None) -> Optional[T]:
        """获取嵌套配置值，支持点分隔路径"""
        keys = path.split('.')
        current = self._config_data

        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def set_nested(self, path: str, value: Any) -> None:
        """设置嵌套配置值"""
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value
        self._typed_cache.clear()

    # ========================================================================
    # 类型安全访问方法
    # ========================================================================

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置（类型安全）"""
        if 'logging_config' not in self._typed_cache:
            try:
                logging_data = self.get_nested('logging_config', {})

                file_data = logging_data.get('file_config', {})
                file_config = FileLoggingConfig(
                    enabled=file_data.get('enabled', False),
                    directory=file_data.get('directory', 'log'),
                    filename=file_data.get('filename', 'quotes.log'),
                    rotation=file_data.get('rotation')
                )

                console_data = logging_data.get('console_config', {})
                console_config = ConsoleLoggingConfig(
                    enabled=console_data.get('enabled', True)
                )

                modules = {}
                for module_name, module_data in logging_data.get('modules', {}).items():
                    modules[module_name] = LoggingModuleConfig(
                        level=module_data.get('level', 'INFO'),
                        enabled=module_data.get('enabled', True)
                    )

                defaults = LoggingConfig()
                self._typed_cache['logging_config'] = LoggingConfig(
                    level=logging_data.get('level', defaults.level),
                    format=logging_data.get('format', defaults.format),
                    date_format=logging_data.get('date_format', defaults.date_format),
                    file_config=file_config,
                    console_config=console_config,
                    modules=modules
                )
            except (AttributeError, TypeError) as e:
                config_logger.error(f"Failed to parse logging config: {e}")
                self._typed_cache['logging_config'] = LoggingConfig()

        return self._typed_cache['logging_config']

    def get_app_config(self) -> AppConfig:
        """获取应用配置（类型安全）"""
        if 'app_config' not in self._typed_cache:
            try:
                app_data = self.get_nested('app_config', {})
                defaults = AppConfig()
                self._typed_cache['app_config'] = AppConfig(
                    environment=str(app_data.get('environment', defaults.environment)),
                    data_file=str(app_data.get('data_file', defaults.data_file)),
                    default_page_size=int(app_data.get('default_page_size', defaults.default_page_size)),
                    default_category=app_data.get('default_category', defaults.default_category),
                    static_dir=app_data.get('static_dir', defaults.static_dir),
                    serve_static=bool(app_data.get('serve_static', defaults.serve_static))
                )
            except (AttributeError, TypeError, ValueError) as e:
                config_logger.error(f"Failed to parse app config: {e}")
                self._typed_cache['app_config'] = AppConfig()

        return self._typed_cache['app_config']

    def get_api_config(self) -> ApiConfig:
        """获取API配置（类型安全）"""
        if 'api_config' not in self._typed_cache:
            try:
                api_data = self.get_nested('api_config', {})
                defaults = ApiConfig()
                self._typed_cache['api_config'] = ApiConfig(
                    host=str(api_data.get('host', defaults.host)),
                    port=int(api_data.get('port', defaults.port)),
                    cors_origins=api_data.get('cors_origins', defaults.cors_origins)
                )
            except (AttributeError, TypeError, ValueError) as e:
                config_logger.error(f"Failed to parse api config: {e}")
                self._typed_cache['api_config'] = ApiConfig()

        return self._typed_cache['api_config']


# ============================================================================
# 全局单例实例
# ============================================================================

config_manager = UnifiedConfigManager()
