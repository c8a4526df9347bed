"""领域层公共模块：值对象基类与领域异常"""

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import (
    DomainException,
    InvalidValueObjectException,
    OtpDeliveryException,
    OtpSenderConfigurationException,
)

__all__ = [
    "BaseValueObject",
    "DomainException",
    "InvalidValueObjectException",
    "OtpDeliveryException",
    "OtpSenderConfigurationException",
]
