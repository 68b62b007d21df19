"""配置模块"""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置类"""

    # 应用信息
    APP_NAME: str = "端口过滤调度扩展"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 服务器配置
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    API_V1_PREFIX: str = "/v1"
    API_V1_STR: str = "/api/v1"

    # 端口过滤配置
    HOST_NETWORK_MODE: str = "host"  # 共享主机网络命名空间的网络模式名

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"  # 允许额外的字段
    )


# 创建全局设置实例
settings = Settings()

# 导出设置
__all__ = ["settings"]
