"""
应用容器（AppContainer）

管理应用层组件：命令/查询处理器、后台服务。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.commands.otp.send_otp import SendOtpHandler
from application.commands.otp.verify_otp import VerifyOtpHandler
from application.handlers.otp.list_pending_otps_handler import ListPendingOtpsHandler
from application.otp.services.otp_sweeper_service import AsyncOtpSweeperService


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 命令处理器 ============

    # 签发 OTP Handler（投递通道延迟到邮箱校验通过后再创建）
    send_otp_handler = providers.Factory(
        SendOtpHandler,
        store=infra.otp_store,
        generator=infra.code_generator,
        sender_provider=infra.otp_sender.provider,
        ttl_seconds=config.settings.provided.otp_expiry_seconds,
        subject=config.settings.provided.otp_subject,
        echo_otp=config.settings.provided.echo_otp,
        rollback_on_delivery_failure=config.settings.provided.otp_rollback_on_delivery_failure,
    )

    # 校验 OTP Handler
    verify_otp_handler = providers.Factory(
        VerifyOtpHandler,
        store=infra.otp_store,
    )

    # ============ 查询处理器 ============

    # 列出待验证 OTP Handler（调试用）
    list_pending_otps_handler = providers.Factory(
        ListPendingOtpsHandler,
        store=infra.otp_store,
    )

    # ============ 应用服务 ============

    # 过期凭证清理服务（单例，整个应用只需一个实例）
    otp_sweeper_service = providers.Singleton(
        AsyncOtpSweeperService,
        store=infra.otp_store,
        interval=config.settings.provided.otp_sweep_interval,
    )
