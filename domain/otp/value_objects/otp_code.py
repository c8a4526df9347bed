"""OTP 验证码值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class OtpCode(BaseValueObject):
    """
    OTP 验证码值对象

    固定 6 位十进制数字，取值范围 [100000, 999999]，首位不为 0。

    Attributes:
        value: 验证码字符串
    """

    LENGTH = 6
    MIN_VALUE = 100000
    MAX_VALUE = 999999

    value: str

    def validate(self) -> None:
        """验证码必须是 6 位数字且在取值范围内"""
        if (
            len(self.value) != self.LENGTH
            or not self.value.isascii()
            or not self.value.isdigit()
        ):
            raise InvalidValueObjectException(
                value_object_type="OtpCode",
                value=self.value,
                reason=f"OTP must be exactly {self.LENGTH} digits",
            )
        if not self.MIN_VALUE <= int(self.value) <= self.MAX_VALUE:
            raise InvalidValueObjectException(
                value_object_type="OtpCode",
                value=self.value,
                reason=f"OTP must be between {self.MIN_VALUE} and {self.MAX_VALUE}",
            )

    def __str__(self) -> str:
        return self.value
