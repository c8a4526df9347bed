"""OTP 领域值对象模块"""

from domain.otp.value_objects.email_identity import EmailIdentity
from domain.otp.value_objects.consume_outcome import ConsumeOutcome
from domain.otp.value_objects.email_provider import EmailProvider
from domain.otp.value_objects.otp_code import OtpCode
from domain.otp.value_objects.otp_email_content import OtpEmailContent

__all__ = [
    "ConsumeOutcome",
    "EmailIdentity",
    "EmailProvider",
    "OtpCode",
    "OtpEmailContent",
]
