"""
配置容器（ConfigContainer）

持有 Settings 单例，供基础设施容器和应用容器读取配置。
"""

from dependency_injector import containers, providers

from infrastructure.config.settings import get_settings


class ConfigContainer(containers.DeclarativeContainer):
    """配置容器 - 管理应用配置"""

    # 应用配置（单例，测试时可 override）
    settings = providers.Singleton(get_settings)
