"""邮箱身份值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class EmailIdentity(BaseValueObject):
    """
    邮箱身份值对象

    OTP 存储的查找键。统一去除首尾空白并转为小写，
    保证 "User@Example.com " 与 "user@example.com" 指向同一条记录。

    Attributes:
        value: 规范化后的邮箱地址
    """

    value: str

    def validate(self) -> None:
        """验证邮箱地址非空且已规范化"""
        if not self.value or not self.value.strip():
            raise InvalidValueObjectException(
                value_object_type="EmailIdentity",
                value=self.value,
                reason="Email cannot be empty",
            )
        if self.value != self.value.strip().lower():
            raise InvalidValueObjectException(
                value_object_type="EmailIdentity",
                value=self.value,
                reason="Email must be normalized, use EmailIdentity.parse()",
            )

    @classmethod
    def parse(cls, raw: Optional[str]) -> "EmailIdentity":
        """
        从用户输入创建身份

        Args:
            raw: 原始邮箱字符串

        Returns:
            规范化后的 EmailIdentity

        Raises:
            InvalidValueObjectException: 如果邮箱为空
        """
        if raw is None:
            raise InvalidValueObjectException(
                value_object_type="EmailIdentity",
                value=raw,
                reason="Email cannot be empty",
            )
        return cls(value=raw.strip().lower())

    def __str__(self) -> str:
        return self.value
