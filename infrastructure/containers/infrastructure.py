"""
基础设施容器（InfraContainer）

管理所有基础设施组件：OTP 凭证存储、验证码生成器、邮件投递通道。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from domain.otp.services.code_generator import OtpCodeGenerator
from infrastructure.otp.senders.brevo_otp_sender import BrevoOtpSender
from infrastructure.otp.senders.smtp_otp_sender import SmtpOtpSender
from infrastructure.otp.stores.in_memory_otp_store import InMemoryOtpStore


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 存储 ============

    # OTP 凭证存储（单例，进程内共享）
    otp_store = providers.Singleton(InMemoryOtpStore)

    # ============ 领域服务 ============

    # 验证码生成器
    code_generator = providers.Singleton(OtpCodeGenerator)

    # ============ 邮件投递 ============

    # SMTP 直连
    smtp_otp_sender = providers.Singleton(
        SmtpOtpSender,
        host=config.settings.provided.email_host,
        port=config.settings.provided.email_port,
        username=config.settings.provided.email_user,
        password=config.settings.provided.email_pass,
        sender_email=config.settings.provided.sender_address,
        sender_name=config.settings.provided.sender_name,
        use_ssl=config.settings.provided.email_use_ssl,
        timeout=config.settings.provided.email_timeout,
    )

    # Brevo 事务邮件 API
    brevo_otp_sender = providers.Singleton(
        BrevoOtpSender,
        api_key=config.settings.provided.brevo_api_key,
        sender_email=config.settings.provided.sender_address,
        sender_name=config.settings.provided.sender_name,
        api_url=config.settings.provided.brevo_api_url,
        timeout=config.settings.provided.email_timeout,
    )

    # 按 EMAIL_PROVIDER 选定唯一的投递通道
    otp_sender = providers.Selector(
        config.settings.provided.email_provider_name,
        smtp=smtp_otp_sender,
        brevo=brevo_otp_sender,
    )
