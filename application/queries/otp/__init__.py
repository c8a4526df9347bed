"""OTP 查询模块"""

from application.queries.otp.list_pending_otps import ListPendingOtpsQuery

__all__ = ["ListPendingOtpsQuery"]
