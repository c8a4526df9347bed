"""Tests for EmailIdentity value object"""

import pytest

from domain.otp.value_objects.email_identity import EmailIdentity
from domain.common.exceptions import InvalidValueObjectException


class TestEmailIdentity:
    """EmailIdentity 值对象测试"""

    def test_parse_trims_and_lowercases(self):
        """测试去除首尾空白并转小写"""
        identity = EmailIdentity.parse("User@Example.com ")

        assert identity.value == "user@example.com"

    def test_parse_equal_identities(self):
        """测试大小写和空白不同的输入得到相同身份"""
        assert EmailIdentity.parse("  USER@example.COM") == EmailIdentity.parse(
            "user@example.com"
        )

    def test_parse_none_raises_error(self):
        """测试 None 抛出异常"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            EmailIdentity.parse(None)

        assert "Email cannot be empty" in exc_info.value.message

    def test_parse_empty_raises_error(self):
        """测试空字符串抛出异常"""
        with pytest.raises(InvalidValueObjectException):
            EmailIdentity.parse("")

    def test_parse_whitespace_raises_error(self):
        """测试纯空白抛出异常"""
        with pytest.raises(InvalidValueObjectException):
            EmailIdentity.parse("   ")

    def test_direct_construction_requires_normalized_value(self):
        """测试直接构造时必须是规范化后的值"""
        with pytest.raises(InvalidValueObjectException) as exc_info:
            EmailIdentity("User@Example.com")

        assert "normalized" in exc_info.value.reason

    def test_str_returns_value(self):
        """测试 str() 返回邮箱地址"""
        assert str(EmailIdentity.parse("a@b.co")) == "a@b.co"

    def test_immutability(self):
        """测试值对象不可变性"""
        identity = EmailIdentity.parse("a@b.co")

        with pytest.raises(Exception):  # FrozenInstanceError
            identity.value = "other@b.co"
