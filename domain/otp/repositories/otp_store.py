"""OTP 凭证存储接口"""

from typing import List, Optional, Protocol

from domain.otp.entities.otp_record import OtpRecord
from domain.otp.value_objects.consume_outcome import ConsumeOutcome


class OtpStore(Protocol):
    """OTP 凭证存储接口

    定义带过期时间的一次性凭证存储契约。具体实现在 infrastructure 层。

    所有实现必须满足：
    - 每个身份至多一条记录，put 原子地替换旧记录
    - get / consume 独立检查过期时间，不依赖后台清理
    - consume 的比较与删除是一个原子操作
    """

    def put(self, identity: str, code: str, ttl_seconds: float) -> OtpRecord:
        """写入或替换身份对应的凭证

        Args:
            identity: 规范化后的邮箱地址
            code: 验证码
            ttl_seconds: 有效期（秒）

        Returns:
            新写入的凭证记录
        """
        ...

    def get(self, identity: str) -> Optional[OtpRecord]:
        """获取未过期的凭证

        Args:
            identity: 规范化后的邮箱地址

        Returns:
            凭证记录，不存在或已过期返回 None
        """
        ...

    def consume(self, identity: str, code: str) -> ConsumeOutcome:
        """校验并消费凭证

        仅当记录存在、未过期且验证码完全一致时删除记录。
        验证码不匹配时不修改记录。结果与比较在同一临界区内判定。

        Args:
            identity: 规范化后的邮箱地址
            code: 用户提交的验证码

        Returns:
            CONSUMED / MISMATCH / ABSENT
        """
        ...

    def delete(self, identity: str) -> bool:
        """删除凭证

        Args:
            identity: 规范化后的邮箱地址

        Returns:
            如果记录存在并被删除返回 True
        """
        ...

    def list_active(self) -> List[OtpRecord]:
        """列出所有未过期的凭证（快照）"""
        ...

    def purge_expired(self) -> int:
        """清理所有已过期的凭证

        Returns:
            被清理的记录数
        """
        ...
