"""OTP 凭证记录实体"""

import hmac
from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class OtpRecord:
    """OTP 凭证记录实体

    每个邮箱身份至多持有一条有效记录。记录不可变：
    重新签发时整体替换，验证成功或过期时删除。

    Attributes:
        identity: 规范化后的邮箱地址
        code: 6 位验证码
        issued_at: 签发时间（UTC）
        expires_at: 过期时间（UTC），到达该时刻即视为失效
    """

    identity: str
    code: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def create(
        cls,
        identity: str,
        code: str,
        ttl_seconds: float,
        now: datetime,
    ) -> "OtpRecord":
        """工厂方法创建凭证记录

        Args:
            identity: 规范化后的邮箱地址
            code: 验证码
            ttl_seconds: 有效期（秒）
            now: 当前时间

        Returns:
            新创建的凭证记录

        Raises:
            ValueError: 如果有效期为负数
        """
        if ttl_seconds < 0:
            raise ValueError(f"TTL must be non-negative, got {ttl_seconds}")
        return cls(
            identity=identity,
            code=code,
            issued_at=now,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )

    def is_expired(self, now: datetime) -> bool:
        """是否已过期（仅在过期时刻之前可见）"""
        return now >= self.expires_at

    def matches(self, code: str) -> bool:
        """验证码是否完全一致（常量时间比较）"""
        return hmac.compare_digest(self.code.encode(), code.encode())

    def remaining_seconds(self, now: datetime) -> int:
        """剩余有效秒数，过期后为 0"""
        return max(0, int((self.expires_at - now).total_seconds()))
