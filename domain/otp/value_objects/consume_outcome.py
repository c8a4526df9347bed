"""凭证消费结果枚举"""

from enum import Enum


class ConsumeOutcome(str, Enum):
    """consume 的结果，在同一把锁内判定"""

    CONSUMED = "consumed"
    """验证码一致，记录已删除"""

    MISMATCH = "mismatch"
    """记录存在且未过期，但验证码不一致；记录保留"""

    ABSENT = "absent"
    """记录不存在、已过期或已被消费"""

    @property
    def succeeded(self) -> bool:
        return self is ConsumeOutcome.CONSUMED
