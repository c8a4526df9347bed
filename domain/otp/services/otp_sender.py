"""OTP 邮件投递接口"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class DeliveryResult:
    """投递结果

    Attributes:
        success: 是否投递成功
        provider: 投递通道名称
        status_code: HTTP 状态码（API 通道且有响应时）
        message_id: 服务商返回的消息 ID（如果有）
        error_message: 错误信息（失败时）
    """

    success: bool
    provider: str
    status_code: Optional[int] = None
    message_id: Optional[str] = None
    error_message: str = ""


class OtpSender(ABC):
    """OTP 邮件投递接口

    每个进程启动时按配置选定一种实现（SMTP 直连或事务邮件 API），
    调用方只依赖 send 能力，不感知具体通道。

    传输层失败以 DeliveryResult(success=False) 返回，不抛出异常。
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """投递通道名称"""
        raise NotImplementedError

    @abstractmethod
    def send(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> DeliveryResult:
        """发送邮件

        Args:
            to_email: 收件人地址
            subject: 邮件主题
            text_body: 纯文本正文
            html_body: HTML 正文（可选）

        Returns:
            DeliveryResult 包含投递结果
        """
        raise NotImplementedError
