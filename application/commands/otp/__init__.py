"""OTP 命令模块"""

from application.commands.otp.send_otp import (
    SendOtpCommand,
    SendOtpResult,
    SendOtpHandler,
)
from application.commands.otp.verify_otp import (
    VerifyOtpCommand,
    VerifyOtpResult,
    VerifyOtpHandler,
)

__all__ = [
    "SendOtpCommand",
    "SendOtpResult",
    "SendOtpHandler",
    "VerifyOtpCommand",
    "VerifyOtpResult",
    "VerifyOtpHandler",
]
