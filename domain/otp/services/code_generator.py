"""OTP 验证码生成服务"""

import secrets

from domain.otp.value_objects.otp_code import OtpCode


class OtpCodeGenerator:
    """
    OTP 验证码生成器

    使用 secrets 模块（CSPRNG）在 [100000, 999999] 内均匀取值，
    保证验证码定长 6 位且无法被预测。
    """

    _SPAN = OtpCode.MAX_VALUE - OtpCode.MIN_VALUE + 1

    def generate(self) -> OtpCode:
        """生成新的验证码"""
        return OtpCode(str(OtpCode.MIN_VALUE + secrets.randbelow(self._SPAN)))
