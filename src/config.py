"""应用配置模块 - 使用 Pydantic Settings 管理环境变量"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类（读取环境变量和 `.env`）"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="JML Automation Hub", description="应用名称")
    app_version: str = Field(default="1.0.0", description="应用版本")
    env: Literal["development", "production", "test"] = Field(
        default="development", description="运行环境"
    )
    debug: bool = Field(default=False, description="调试模式（打印 SQL）")
    log_level: str = Field(default="INFO", description="日志级别")

    # Server
    host: str = Field(default="0.0.0.0", description="服务器地址")
    port: int = Field(default=5000, description="服务器端口")
    reload: bool = Field(default=False, description="热重载")

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./jml_hub.db",
        description="数据库连接 URL（异步驱动）",
    )

    # CORS
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        description="允许的 CORS 来源",
    )

    # Security
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, description="bcrypt 计算成本")

    # Query limits
    audit_log_limit: int = Field(default=100, description="审计日志单次查询上限")
    notification_limit: int = Field(default=50, description="通知单次查询上限")


# 全局配置实例
settings = Settings()
