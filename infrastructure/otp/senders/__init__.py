"""OTP 邮件投递实现"""

from infrastructure.otp.senders.brevo_otp_sender import BrevoOtpSender
from infrastructure.otp.senders.smtp_otp_sender import SmtpOtpSender

__all__ = ["BrevoOtpSender", "SmtpOtpSender"]
