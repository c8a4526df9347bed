"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import List, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.otp.value_objects.email_provider import EmailProvider


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "OTP Service"
    app_version: str = "1.0.0"
    port: int = 5000

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = ""  # 为空时只输出到控制台

    # ========== 邮件投递通道 ==========
    email_provider: EmailProvider = EmailProvider.SMTP

    # SMTP 直连
    email_host: str = "smtp.gmail.com"
    email_port: int = 587
    email_user: str = ""
    email_pass: str = ""
    email_use_ssl: bool = False  # True 使用 SMTP_SSL，否则 STARTTLS
    email_timeout: float = 10.0
    email_verify_on_startup: bool = True  # 启动时测试 SMTP 登录（失败只记录日志）

    # Brevo 事务邮件 API
    brevo_api_key: str = ""
    brevo_api_url: str = "https://api.brevo.com/v3/smtp/email"

    # 发件人
    sender_name: str = "NoReply"
    sender_email: str = ""

    # ========== OTP 配置 ==========
    otp_expiry_seconds: int = Field(default=300, ge=0)
    otp_subject: str = "Your OTP Code"
    otp_sweep_interval: float = Field(default=60.0, ge=0)  # 0 表示关闭后台清理
    otp_rollback_on_delivery_failure: bool = False
    return_otp_in_response: bool = False

    # ========== 接口配置 ==========
    debug_endpoint_enabled: bool = False
    cors_allow_origins: str = Field(
        default="*",
        validation_alias=AliasChoices("cors_allow_origins", "cors_origin"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @field_validator("email_provider", mode="before")
    @classmethod
    def _parse_email_provider(cls, value):
        """支持 "gmail" 作为 smtp 的别名，大小写不敏感"""
        if isinstance(value, str):
            return EmailProvider.parse(value)
        return value

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def echo_otp(self) -> bool:
        """是否在响应中回显验证码（生产环境强制关闭）"""
        return self.return_otp_in_response and not self.is_prod

    @property
    def email_provider_name(self) -> str:
        """投递通道名称（用于 DI 容器选择实现）"""
        return self.email_provider.value

    @property
    def sender_address(self) -> str:
        """发件人地址，未配置时回退到 SMTP 账号"""
        return self.sender_email or self.email_user

    @property
    def cors_origins(self) -> List[str]:
        """允许的跨域来源列表"""
        origins = [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
        return origins or ["*"]


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
