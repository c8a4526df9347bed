"""OTP 领域模块

一次性验证码的领域层，包含身份与验证码值对象、凭证记录实体、
凭证存储接口和投递接口。
"""

from domain.otp.entities.otp_record import OtpRecord
from domain.otp.repositories.otp_store import OtpStore
from domain.otp.services.code_generator import OtpCodeGenerator
from domain.otp.services.otp_sender import DeliveryResult, OtpSender
from domain.otp.value_objects.consume_outcome import ConsumeOutcome
from domain.otp.value_objects.email_identity import EmailIdentity
from domain.otp.value_objects.email_provider import EmailProvider
from domain.otp.value_objects.otp_code import OtpCode
from domain.otp.value_objects.otp_email_content import OtpEmailContent

__all__ = [
    "OtpRecord",
    "OtpStore",
    "OtpCodeGenerator",
    "DeliveryResult",
    "OtpSender",
    "ConsumeOutcome",
    "EmailIdentity",
    "EmailProvider",
    "OtpCode",
    "OtpEmailContent",
]
