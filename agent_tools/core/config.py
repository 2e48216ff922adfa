"""
Agent Tools 配置

使用 pydantic-settings 管理环境变量配置
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # 基础配置
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # 开启后输出单行 JSON，便于日志聚合

    # 服务配置
    SERVICE_NAME: str = "agent-tools"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # CORS 配置
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Tool Server 配置（HTTP 客户端默认指向的服务地址）
    TOOLS_BASE_URL: str = "http://localhost:8000"
    TOOLS_TIMEOUT_MS: int = 30000

    # 工具调用日志是否附带（脱敏后的）参数样本
    TOOLS_LOG_ARGS: bool = True

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
