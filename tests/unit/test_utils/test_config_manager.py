"""
Unit tests for configuration manager
"""

import json

import pytest

from utils.config_manager import UnifiedConfigManager, AppConfig, ApiConfig
from utils.exceptions import ConfigurationError


@pytest.mark.unit
class TestConfigManager:
    """Test cases for UnifiedConfigManager"""

    @pytest.fixture
    def sample_config(self):
        """Sample configuration data"""
        return {
            "app_config": {
                "environment": "test",
                "data_file": "data/test_quotes.json",
                "default_page_size": 5
            },
            "api_config": {
                "host": "127.0.0.1",
                "port": 8001,
                "cors_origins": ["http://localhost:3000"]
            }
        }

    @pytest.fixture
    def config_dir(self, sample_config, temp_dir):
        """Create temporary config directory"""
        with open(temp_dir / "config.json", 'w') as f:
            json.dump(sample_config, f)
        return temp_dir

    @pytest.fixture
    def config_manager(self, config_dir):
        return UnifiedConfigManager(str(config_dir), use_env=False)

    def test_get_config_value(self, config_manager):
        assert config_manager.get("api_config")["port"] == 8001
        assert config_manager.get_nested("api_config.host") == "127.0.0.1"
        assert config_manager.get_nested("api_config.missing", "default") == "default"
        assert config_manager.get("nonexistent", "default") == "default"

    def test_typed_app_config(self, config_manager):
        app_config = config_manager.get_app_config()
        assert isinstance(app_config, AppConfig)
        assert app_config.environment == "test"
        assert app_config.default_page_size == 5
        # 未配置的字段使用默认值
        assert app_config.default_category == "general"

    def test_typed_api_config(self, config_manager):
        api_config = config_manager.get_api_config()
        assert isinstance(api_config, ApiConfig)
        assert api_config.port == 8001
        assert api_config.cors_origins == ["http://localhost:3000"]

    def test_set_nested_clears_typed_cache(self, config_manager):
        assert config_manager.get_api_config().port == 8001
        config_manager.set_nested("api_config.port", 9000)
        assert config_manager.get_api_config().port == 9000

    def test_files_merged_in_name_order(self, config_dir):
        with open(config_dir / "zz_override.json", 'w') as f:
            json.dump({"app_config": {"environment": "staging"}}, f)
        manager = UnifiedConfigManager(str(config_dir), use_env=False)
        assert manager.get_app_config().environment == "staging"

    def test_env_overrides(self, config_dir, monkeypatch):
        monkeypatch.setenv("QUOTES_ENV", "production")
        monkeypatch.setenv("PORT", "4321")
        manager = UnifiedConfigManager(str(config_dir))
        assert manager.get_app_config().environment == "production"
        assert manager.get_api_config().port == 4321

    def test_node_env_sets_environment(self, config_dir, monkeypatch):
        monkeypatch.delenv("QUOTES_ENV", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")
        manager = UnifiedConfigManager(str(config_dir))
        assert manager.get_app_config().environment == "production"

    def test_quotes_env_takes_precedence_over_node_env(self, config_dir, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "production")
        monkeypatch.setenv("QUOTES_ENV", "staging")
        manager = UnifiedConfigManager(str(config_dir))
        assert manager.get_app_config().environment == "staging"

    def test_missing_directory(self, temp_dir):
        with pytest.raises(ConfigurationError):
            UnifiedConfigManager(str(temp_dir / "missing"), use_env=False)

    def test_empty_directory(self, temp_dir):
        with pytest.raises(ConfigurationError):
            UnifiedConfigManager(str(temp_dir), use_env=False)

    def test_invalid_json(self, temp_dir):
        (temp_dir / "config.json").write_text("{invalid", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            UnifiedConfigManager(str(temp_dir), use_env=False)

    def test_invalid_typed_value_falls_back(self, config_dir):
        manager = UnifiedConfigManager(str(config_dir), use_env=False)
        manager.set_nested("api_config.port", "not-a-port")
        assert manager.get_api_config() == ApiConfig()
