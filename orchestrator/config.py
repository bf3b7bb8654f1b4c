"""
配置管理模块
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    # 服务配置
    APP_NAME: str = Field(default="Crash Reports Collector", description="应用名称")
    APP_VERSION: str = Field(default="1.0.0", description="应用版本")
    DEBUG: bool = Field(default=False, description="调试模式")

    # FastAPI 配置
    HOST: str = Field(default="127.0.0.1", description="监听地址")
    PORT: int = Field(default=8000, description="监听端口")

    # 读取 crash 文件时使用的编码
    READ_ENCODING: str = Field(default="utf-8", description="crash 文件编码")

    # 日志配置
    LOG_LEVEL: str = Field(default="INFO", description="日志级别")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="日志格式"
    )


# 全局配置实例
settings = Settings()


def get_settings() -> Settings:
    """获取配置"""
    return settings
