"""Brevo 事务邮件 API 投递实现"""

import logging
from typing import Any, Dict, Optional

import httpx

from domain.common.exceptions import OtpSenderConfigurationException
from domain.otp.services.otp_sender import DeliveryResult, OtpSender
from domain.otp.value_objects.email_provider import EmailProvider
from domain.otp.value_objects.otp_email_content import wrap_text_as_html


class BrevoOtpSender(OtpSender):
    """Brevo 事务邮件 API 投递实现

    使用 httpx 向 Brevo `/v3/smtp/email` 端点提交邮件。
    不做重试，失败直接返回给调用方。

    Attributes:
        DEFAULT_API_URL: Brevo 事务邮件端点
        TIMEOUT: 请求超时时间（秒）
    """

    DEFAULT_API_URL: str = "https://api.brevo.com/v3/smtp/email"
    TIMEOUT: float = 10.0

    def __init__(
        self,
        api_key: str,
        sender_email: str,
        sender_name: str = "NoReply",
        api_url: str = DEFAULT_API_URL,
        timeout: float = TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化客户端

        Args:
            api_key: Brevo API Key
            sender_email: 发件人地址（需在 Brevo 验证）
            sender_name: 发件人显示名称
            api_url: API 端点
            timeout: 请求超时时间（秒）
            logger: 日志记录器（可选）

        Raises:
            OtpSenderConfigurationException: 如果 API Key 未配置
        """
        if not api_key:
            raise OtpSenderConfigurationException(
                "BREVO_API_KEY not set", provider=EmailProvider.BREVO.value
            )
        self._api_key = api_key
        self._sender_email = sender_email
        self._sender_name = sender_name
        self._api_url = api_url
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    @property
    def provider(self) -> str:
        return EmailProvider.BREVO.value

    def send(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> DeliveryResult:
        """通过 Brevo API 发送邮件

        Args:
            to_email: 收件人地址
            subject: 邮件主题
            text_body: 纯文本正文
            html_body: HTML 正文（缺省时由纯文本包裹生成）

        Returns:
            DeliveryResult 包含投递结果
        """
        payload = self.build_payload(to_email, subject, text_body, html_body)

        try:
            response = httpx.post(
                self._api_url,
                json=payload,
                timeout=self._timeout,
                headers={
                    "accept": "application/json",
                    "api-key": self._api_key,
                    "Content-Type": "application/json",
                },
            )
        except httpx.TimeoutException:
            return self._failure(to_email, "Request timeout")
        except httpx.RequestError as e:
            return self._failure(to_email, f"Request error: {str(e)}")

        if not 200 <= response.status_code < 300:
            return self._failure(
                to_email,
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        message_id = self._extract_message_id(response)
        self._logger.info(
            f"OTP email sent via Brevo to {to_email} (status {response.status_code})"
        )
        return DeliveryResult(
            success=True,
            provider=self.provider,
            status_code=response.status_code,
            message_id=message_id,
        )

    def build_payload(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> Dict[str, Any]:
        """构建 Brevo 请求载荷"""
        return {
            "sender": {"name": self._sender_name, "email": self._sender_email},
            "to": [{"email": to_email}],
            "subject": subject,
            "htmlContent": html_body or wrap_text_as_html(text_body),
            "textContent": text_body,
        }

    def _extract_message_id(self, response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get("messageId")
        return None

    def _failure(
        self, to_email: str, error: str, status_code: Optional[int] = None
    ) -> DeliveryResult:
        self._logger.error(f"Brevo send to {to_email} failed: {error}")
        return DeliveryResult(
            success=False,
            provider=self.provider,
            status_code=status_code,
            error_message=error,
        )
