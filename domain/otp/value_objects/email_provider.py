"""邮件投递通道枚举"""

from enum import Enum


class EmailProvider(str, Enum):
    """邮件投递通道枚举"""

    SMTP = "smtp"
    """直接通过 SMTP 服务器投递"""

    BREVO = "brevo"
    """通过 Brevo 事务邮件 HTTP API 投递"""

    @classmethod
    def parse(cls, value: str) -> "EmailProvider":
        """解析配置值，"gmail" 作为 smtp 的别名"""
        normalized = (value or "").strip().lower()
        if normalized == "gmail":
            return cls.SMTP
        return cls(normalized)
