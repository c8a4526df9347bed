"""OTP Handlers"""

from application.handlers.otp.list_pending_otps_handler import (
    ListPendingOtpsHandler,
    PendingOtpItem,
)

__all__ = ["ListPendingOtpsHandler", "PendingOtpItem"]
