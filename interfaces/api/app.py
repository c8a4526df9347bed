"""
FastAPI 应用工厂

创建 DI 容器、连接路由 handler 获取器、注册中间件与异常处理，
并在 lifespan 中启动/停止后台清理服务。
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from domain.common.exceptions import OtpDeliveryException
from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap
from infrastructure.logging import configure_logging
from infrastructure.otp.senders.smtp_otp_sender import SmtpOtpSender
from interfaces.api.routes import debug_router, otp_router
from interfaces.api.routes.debug import set_list_pending_handler_getter
from interfaces.api.routes.otp import (
    INVALID_REQUEST_MESSAGES,
    error_response,
    set_send_otp_handler_getter,
    set_verify_otp_handler_getter,
)


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Bootstrap] = None,
    setup_logging: bool = True,
) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        settings: 应用配置，默认从环境变量读取
        container: 已创建的容器（测试时可传入以 override provider）
        setup_logging: 是否配置根日志记录器

    Returns:
        FastAPI 实例
    """
    settings = settings or get_settings()
    boot = container or bootstrap(settings)

    if setup_logging:
        configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await _check_email_transport(boot, settings)

        sweeper = None
        if settings.otp_sweep_interval > 0:
            sweeper = boot.app.otp_sweeper_service()
            await sweeper.start()

        logger.info(
            f"{settings.app_name} started - provider={settings.email_provider_name}, "
            f"ttl={settings.otp_expiry_seconds}s"
        )
        try:
            yield
        finally:
            if sweeper is not None:
                await sweeper.stop()

    app = FastAPI(
        title=settings.app_name,
        description="邮箱一次性验证码服务 - 签发、投递、校验",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.container = boot
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 注册 Handler Getters（连接 DI 容器到路由）
    set_send_otp_handler_getter(boot.app.send_otp_handler)
    set_verify_otp_handler_getter(boot.app.verify_otp_handler)

    app.include_router(otp_router)

    if settings.debug_endpoint_enabled:
        set_list_pending_handler_getter(
            boot.app.list_pending_otps_handler,
            reveal_codes=settings.echo_otp,
        )
        app.include_router(debug_router)
        logger.warning("Debug endpoint /__debug/otps is enabled")

    _register_exception_handlers(app)
    _register_service_routes(app, settings)
    return app


async def _check_email_transport(boot: Bootstrap, settings: Settings) -> None:
    """启动时检查投递通道，失败只记录日志，不阻止启动"""
    try:
        sender = boot.infra.otp_sender()
    except OtpDeliveryException as e:
        logger.error(f"Email transport not initialized ({settings.email_provider_name}): {e.message}")
        return

    if isinstance(sender, SmtpOtpSender) and settings.email_verify_on_startup:
        await asyncio.to_thread(sender.verify_connection)
    elif not isinstance(sender, SmtpOtpSender):
        logger.info(f"Email provider is {sender.provider}; sending through its HTTP API")


def _register_exception_handlers(app: FastAPI) -> None:
    """注册异常处理：统一返回 {success: false, message, error}"""

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        message = INVALID_REQUEST_MESSAGES.get(request.url.path, "Invalid request")
        return error_response(status.HTTP_400_BAD_REQUEST, message)


def _register_service_routes(app: FastAPI, settings: Settings) -> None:
    """注册服务信息与健康检查路由"""

    @app.get("/")
    async def root():
        """服务信息"""
        endpoints = {
            "send_otp": "/send-otp",
            "verify_otp": "/verify-otp",
        }
        if settings.debug_endpoint_enabled:
            endpoints["debug"] = "/__debug/otps"
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "provider": settings.email_provider_name,
            "docs": "/docs",
            "endpoints": endpoints,
        }

    @app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "healthy"}
