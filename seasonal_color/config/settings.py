"""
应用配置模块
============

集中管理所有配置项，支持环境变量覆盖。

使用方式:
    from seasonal_color.config.settings import settings
    print(settings.LOG_LEVEL)

环境变量:
    可通过 .env 文件或系统环境变量覆盖默认配置

注意:
    分类阈值 (12 / 10 / 2 / 4) 是经验调校值，不属于配置项。
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# 目录常量
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """应用配置类，支持从环境变量加载配置"""

    # ==================== 服务配置 ====================
    APP_NAME: str = "Seasonal Color"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # ==================== 色板配置 ====================
    # 为空时使用内置色板；否则从该 JSON 文件加载（结构同 palette_data）
    PALETTE_FILE: Path | None = None

    # ==================== Pydantic 配置 ====================
    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 忽略未知的环境变量
    )


@lru_cache
def get_settings() -> Settings:
    """
    获取配置单例（带缓存）

    使用 lru_cache 确保只创建一个 Settings 实例
    """
    return Settings()


# 配置单例
settings = get_settings()
