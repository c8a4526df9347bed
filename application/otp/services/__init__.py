"""OTP 应用服务模块"""

from application.otp.services.otp_sweeper_service import AsyncOtpSweeperService

__all__ = ["AsyncOtpSweeperService"]
