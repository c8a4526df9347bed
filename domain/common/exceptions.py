"""领域异常"""

from typing import Any, Optional


class DomainException(Exception):
    """领域异常基类

    Attributes:
        message: 可读的错误信息
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidValueObjectException(DomainException):
    """值对象校验失败"""

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {value_object_type}: {reason}")


class OtpDeliveryException(DomainException):
    """OTP 邮件投递失败

    Attributes:
        provider: 投递通道名称（smtp / brevo）
    """

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class OtpSenderConfigurationException(OtpDeliveryException):
    """投递通道配置缺失或无效（初始化阶段失败）"""
