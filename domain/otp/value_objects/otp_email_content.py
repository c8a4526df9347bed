"""OTP 邮件内容值对象"""

from dataclasses import dataclass
from html import escape
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class OtpEmailContent(BaseValueObject):
    """
    OTP 邮件内容值对象

    封装发送给用户的主题、纯文本正文和 HTML 正文。

    Attributes:
        subject: 邮件主题
        text: 纯文本正文
        html: HTML 正文（可选，缺省时由纯文本包裹生成）
    """

    DEFAULT_SUBJECT = "Your OTP Code"

    subject: str
    text: str
    html: Optional[str] = None

    def validate(self) -> None:
        """主题和正文不能为空"""
        if not self.subject:
            raise InvalidValueObjectException(
                value_object_type="OtpEmailContent",
                value=self.subject,
                reason="Subject cannot be empty",
            )
        if not self.text:
            raise InvalidValueObjectException(
                value_object_type="OtpEmailContent",
                value=self.text,
                reason="Text body cannot be empty",
            )

    @classmethod
    def for_code(
        cls, code: str, ttl_seconds: int, subject: str = DEFAULT_SUBJECT
    ) -> "OtpEmailContent":
        """
        根据验证码和有效期生成邮件内容

        Args:
            code: 验证码
            ttl_seconds: 有效期（秒）
            subject: 邮件主题

        Returns:
            OtpEmailContent 实例
        """
        text = (
            f"Your OTP is: {code}\n"
            f"This code will expire in {ttl_seconds // 60} minute(s)."
        )
        return cls(subject=subject, text=text)

    @property
    def html_body(self) -> str:
        """
        获取 HTML 正文

        未单独提供 HTML 时，将纯文本包裹为段落返回。
        """
        if self.html:
            return self.html
        return wrap_text_as_html(self.text)


def wrap_text_as_html(text: str) -> str:
    """将纯文本转义后包裹为 HTML 段落，换行转为 <br>"""
    return "<p>" + escape(text).replace("\n", "<br>") + "</p>"
