"""校验 OTP 命令"""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.common.exceptions import InvalidValueObjectException
from domain.otp.repositories.otp_store import OtpStore
from domain.otp.value_objects.consume_outcome import ConsumeOutcome
from domain.otp.value_objects.email_identity import EmailIdentity


@dataclass
class VerifyOtpCommand:
    """校验 OTP 命令

    Attributes:
        email: 原始邮箱地址
        otp: 用户提交的验证码
    """

    email: Optional[str]
    otp: Optional[str]


@dataclass
class VerifyOtpResult:
    """命令执行结果

    Attributes:
        success: 是否校验通过
        message: 结果消息
        error_code: 错误代码（INVALID_INPUT / OTP_NOT_FOUND / OTP_INVALID）
    """

    success: bool
    message: str = ""
    error_code: Optional[str] = None


class VerifyOtpHandler:
    """校验 OTP 处理器

    校验通过即消费凭证，同一验证码不能重复使用。
    验证码错误时保留凭证，不计错误次数。
    """

    def __init__(
        self,
        store: OtpStore,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            store: OTP 凭证存储
            logger: 日志记录器
        """
        self._store = store
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, command: VerifyOtpCommand) -> VerifyOtpResult:
        """
        处理校验 OTP 命令

        Args:
            command: 校验 OTP 命令

        Returns:
            命令执行结果
        """
        otp = (command.otp or "").strip()
        try:
            identity = EmailIdentity.parse(command.email)
        except InvalidValueObjectException:
            identity = None

        if identity is None or not otp:
            return VerifyOtpResult(
                success=False,
                message="Email & OTP required",
                error_code="INVALID_INPUT",
            )

        email = identity.value

        outcome = self._store.consume(email, otp)
        if outcome.succeeded:
            self._logger.info(f"OTP verified for {email}")
            return VerifyOtpResult(success=True, message="OTP verified successfully")

        if outcome is ConsumeOutcome.ABSENT:
            self._logger.info(f"OTP not found or expired for {email}")
            return VerifyOtpResult(
                success=False,
                message="OTP not found or expired",
                error_code="OTP_NOT_FOUND",
            )

        self._logger.info(f"Invalid OTP for {email}")
        return VerifyOtpResult(
            success=False,
            message="Invalid OTP",
            error_code="OTP_INVALID",
        )
