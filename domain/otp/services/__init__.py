"""OTP 领域服务模块"""

from domain.otp.services.code_generator import OtpCodeGenerator
from domain.otp.services.otp_sender import DeliveryResult, OtpSender

__all__ = ["OtpCodeGenerator", "DeliveryResult", "OtpSender"]
