"""
配置测试
"""

from agent_tools.core.config import Settings


class TestSettings:
    """环境变量配置"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TOOLS_TIMEOUT_MS", raising=False)
        monkeypatch.delenv("TOOLS_BASE_URL", raising=False)
        monkeypatch.delenv("TOOLS_LOG_ARGS", raising=False)
        monkeypatch.delenv("ENV", raising=False)

        config = Settings(_env_file=None)

        assert config.TOOLS_TIMEOUT_MS == 30000
        assert config.TOOLS_BASE_URL == "http://localhost:8000"
        assert config.TOOLS_LOG_ARGS is True
        assert config.is_production is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TOOLS_TIMEOUT_MS", "5000")
        monkeypatch.setenv("ENV", "production")
        monkeypatch.setenv("TOOLS_LOG_ARGS", "false")

        config = Settings(_env_file=None)

        assert config.TOOLS_TIMEOUT_MS == 5000
        assert config.is_production is True
        assert config.TOOLS_LOG_ARGS is False
