"""OTP 领域实体模块"""

from domain.otp.entities.otp_record import OtpRecord

__all__ = ["OtpRecord"]
