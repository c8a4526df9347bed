"""SMTP 直连 OTP 投递实现"""

import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Optional

from domain.common.exceptions import OtpSenderConfigurationException
from domain.otp.services.otp_sender import DeliveryResult, OtpSender
from domain.otp.value_objects.email_provider import EmailProvider
from domain.otp.value_objects.otp_email_content import wrap_text_as_html


class SmtpOtpSender(OtpSender):
    """
    SMTP 直连投递实现

    使用 Python 标准库 smtplib 提交邮件：
    - 默认 STARTTLS（如 smtp.gmail.com:587）
    - use_ssl=True 时使用隐式 TLS（如 465 端口）
    每次发送建立独立会话，发送完成后关闭。
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender_email: str = "",
        sender_name: str = "",
        use_ssl: bool = False,
        timeout: float = 10.0,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 SMTP 投递器

        Args:
            host: SMTP 服务器地址
            port: SMTP 服务器端口
            username: 登录账号
            password: 登录密码（应用专用密码）
            sender_email: 发件人地址，默认使用登录账号
            sender_name: 发件人显示名称
            use_ssl: 是否使用隐式 TLS
            timeout: 连接超时时间（秒）
            logger: 日志记录器

        Raises:
            OtpSenderConfigurationException: 如果账号或密码未配置
        """
        if not host:
            raise OtpSenderConfigurationException(
                "SMTP host is not set", provider=EmailProvider.SMTP.value
            )
        if not username or not password:
            raise OtpSenderConfigurationException(
                "EMAIL_USER / EMAIL_PASS not set", provider=EmailProvider.SMTP.value
            )
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender_email = sender_email or username
        self._sender_name = sender_name
        self._use_ssl = use_ssl
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    @property
    def provider(self) -> str:
        return EmailProvider.SMTP.value

    def send(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
    ) -> DeliveryResult:
        """
        通过 SMTP 发送邮件

        Args:
            to_email: 收件人地址
            subject: 邮件主题
            text_body: 纯文本正文
            html_body: HTML 正文（可选，缺省时由纯文本生成）

        Returns:
            DeliveryResult 包含投递结果
        """
        message = self._build_message(to_email, subject, text_body, html_body)

        try:
            with self._connect() as smtp:
                smtp.login(self._username, self._password)
                smtp.send_message(message)
        except smtplib.SMTPAuthenticationError as e:
            return self._failure(to_email, f"SMTP authentication failed: {e}")
        except smtplib.SMTPException as e:
            return self._failure(to_email, f"SMTP error: {e}")
        except OSError as e:
            # socket.timeout / gaierror / ConnectionRefusedError 都是 OSError
            return self._failure(to_email, f"SMTP connection failed: {e}")

        self._logger.info(f"OTP email sent via SMTP to {to_email}")
        return DeliveryResult(
            success=True,
            provider=self.provider,
            message_id=message["Message-ID"],
        )

    def verify_connection(self) -> bool:
        """
        验证 SMTP 连接与登录

        Returns:
            True 如果可以连接并登录，否则 False
        """
        try:
            with self._connect() as smtp:
                smtp.login(self._username, self._password)
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error(f"SMTP verify failed: {e}")
            return False

        self._logger.info(f"SMTP ready to send mails ({self._host}:{self._port})")
        return True

    def _connect(self) -> smtplib.SMTP:
        """建立 SMTP 会话（SSL 或 STARTTLS）"""
        context = ssl.create_default_context()
        if self._use_ssl:
            return smtplib.SMTP_SSL(
                host=self._host,
                port=self._port,
                timeout=self._timeout,
                context=context,
            )

        smtp = smtplib.SMTP(host=self._host, port=self._port, timeout=self._timeout)
        try:
            smtp.starttls(context=context)
        except BaseException:
            smtp.close()
            raise
        return smtp

    def _build_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str],
    ) -> EmailMessage:
        """构建包含纯文本和 HTML 两部分的邮件"""
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = formataddr((self._sender_name, self._sender_email))
        message["To"] = to_email
        message["Message-ID"] = _make_msgid(self._sender_email)
        message.set_content(text_body)
        message.add_alternative(html_body or wrap_text_as_html(text_body), subtype="html")
        return message

    def _failure(self, to_email: str, error: str) -> DeliveryResult:
        self._logger.error(f"SMTP send to {to_email} failed: {error}")
        return DeliveryResult(
            success=False,
            provider=self.provider,
            error_message=error,
        )


def _make_msgid(sender_email: str) -> str:
    """以发件人域名生成 Message-ID"""
    domain = sender_email.rpartition("@")[2] or None
    return make_msgid(domain=domain)
