"""签发 OTP 命令"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from domain.common.exceptions import InvalidValueObjectException, OtpDeliveryException
from domain.otp.repositories.otp_store import OtpStore
from domain.otp.services.code_generator import OtpCodeGenerator
from domain.otp.services.otp_sender import OtpSender
from domain.otp.value_objects.email_identity import EmailIdentity
from domain.otp.value_objects.otp_email_content import OtpEmailContent


@dataclass
class SendOtpCommand:
    """签发 OTP 命令

    Attributes:
        email: 原始邮箱地址（未规范化）
    """

    email: Optional[str]


@dataclass
class SendOtpResult:
    """命令执行结果

    Attributes:
        success: 是否成功
        message: 结果消息
        email: 规范化后的邮箱地址
        otp: 验证码（仅在开启回显时有值）
        error_code: 错误代码（失败时有值）
        error: 错误详情（投递失败时有值）
    """

    success: bool
    message: str = ""
    email: Optional[str] = None
    otp: Optional[str] = None
    error_code: Optional[str] = None
    error: Optional[str] = None


class SendOtpHandler:
    """签发 OTP 处理器

    处理签发命令：
    1. 规范化邮箱
    2. 获取投递通道
    3. 生成验证码
    4. 写入凭证存储（替换旧记录）
    5. 通过配置的通道投递

    投递通道在邮箱校验通过后才创建，通道配置缺失时返回投递失败且不写入存储。
    写入存储发生在投递之前。投递失败时默认保留凭证，
    开启 rollback_on_delivery_failure 后删除凭证。
    """

    def __init__(
        self,
        store: OtpStore,
        generator: OtpCodeGenerator,
        sender_provider: Callable[[], OtpSender],
        ttl_seconds: int = 300,
        subject: str = OtpEmailContent.DEFAULT_SUBJECT,
        echo_otp: bool = False,
        rollback_on_delivery_failure: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            store: OTP 凭证存储
            generator: 验证码生成器
            sender_provider: 返回邮件投递通道的工厂（首次调用时创建通道）
            ttl_seconds: 验证码有效期（秒）
            subject: 邮件主题
            echo_otp: 是否在结果中回显验证码（仅用于非生产调试）
            rollback_on_delivery_failure: 投递失败时是否删除凭证
            logger: 日志记录器
        """
        self._store = store
        self._generator = generator
        self._sender_provider = sender_provider
        self._ttl_seconds = ttl_seconds
        self._subject = subject
        self._echo_otp = echo_otp
        self._rollback_on_delivery_failure = rollback_on_delivery_failure
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, command: SendOtpCommand) -> SendOtpResult:
        """
        处理签发 OTP 命令

        Args:
            command: 签发 OTP 命令

        Returns:
            命令执行结果
        """
        # 1. 规范化邮箱
        try:
            identity = EmailIdentity.parse(command.email)
        except InvalidValueObjectException as e:
            self._logger.warning(f"Rejected send-otp request: {e.reason}")
            return SendOtpResult(
                success=False,
                message="Email is required",
                error_code="INVALID_INPUT",
            )

        email = identity.value

        # 2. 获取投递通道（配置缺失时在此失败）
        try:
            sender = self._sender_provider()
        except OtpDeliveryException as e:
            self._logger.error(f"Email transport not available for {email}: {e.message}")
            return SendOtpResult(
                success=False,
                message="Failed to send OTP",
                email=email,
                error_code="DELIVERY_FAILED",
                error=e.message,
            )

        # 3-4. 生成并写入存储
        code = self._generator.generate()
        self._store.put(email, code.value, self._ttl_seconds)

        # 5. 投递（不持有存储锁）
        content = OtpEmailContent.for_code(code.value, self._ttl_seconds, self._subject)
        try:
            delivery = sender.send(
                to_email=email,
                subject=content.subject,
                text_body=content.text,
                html_body=content.html_body,
            )
            delivered, error = delivery.success, delivery.error_message
        except Exception as e:
            self._logger.exception(f"Unexpected error sending OTP to {email}")
            delivered, error = False, str(e)

        if not delivered:
            if self._rollback_on_delivery_failure:
                self._store.delete(email)
                self._logger.info(f"Rolled back OTP for {email} after delivery failure")
            self._logger.error(
                f"Failed to send OTP via {sender.provider} to {email}: {error}"
            )
            return SendOtpResult(
                success=False,
                message="Failed to send OTP",
                email=email,
                error_code="DELIVERY_FAILED",
                error=error,
            )

        self._logger.info(f"OTP sent via {sender.provider} to {email}")
        return SendOtpResult(
            success=True,
            message="OTP sent successfully",
            email=email,
            otp=code.value if self._echo_otp else None,
        )
