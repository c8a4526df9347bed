"""OTP 仓储接口模块"""

from domain.otp.repositories.otp_store import OtpStore

__all__ = ["OtpStore"]
