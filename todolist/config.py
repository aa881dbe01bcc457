"""
全局配置：通过 pydantic-settings 读取环境变量（前缀 TODOLIST_）或 .env 文件
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="TODOLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "To-Do List API"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    reload: bool = False  # 开发时可开启热重载


settings = Settings()
