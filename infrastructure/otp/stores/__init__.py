"""OTP 凭证存储实现"""

from infrastructure.otp.stores.in_memory_otp_store import InMemoryOtpStore

__all__ = ["InMemoryOtpStore"]
