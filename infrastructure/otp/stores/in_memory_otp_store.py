"""内存 OTP 凭证存储实现"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from domain.otp.entities.otp_record import OtpRecord
from domain.otp.repositories.otp_store import OtpStore
from domain.otp.value_objects.consume_outcome import ConsumeOutcome


def utc_now() -> datetime:
    """当前 UTC 时间"""
    return datetime.now(timezone.utc)


class InMemoryOtpStore(OtpStore):
    """内存 OTP 凭证存储

    以规范化邮箱为键的进程内字典，使用一把全局锁串行化所有读-改-写操作。
    锁只在单次查找/修改期间持有，不在锁内做任何 I/O。

    过期以读取时检查为准；purge_expired 只负责回收内存。
    数据不跨进程、不跨实例共享。
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化存储

        Args:
            clock: 时钟函数，返回当前时间（测试时可注入）
            logger: 日志记录器
        """
        self._clock = clock
        self._records: Dict[str, OtpRecord] = {}
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    def put(self, identity: str, code: str, ttl_seconds: float) -> OtpRecord:
        record = OtpRecord.create(
            identity=identity,
            code=code,
            ttl_seconds=ttl_seconds,
            now=self._clock(),
        )
        with self._lock:
            replaced = identity in self._records
            self._records[identity] = record

        if replaced:
            self._logger.debug(f"Replaced pending OTP for {identity}")
        return record

    def get(self, identity: str) -> Optional[OtpRecord]:
        now = self._clock()
        with self._lock:
            record = self._records.get(identity)
            if record is None:
                return None
            if record.is_expired(now):
                del self._records[identity]
                return None
            return record

    def consume(self, identity: str, code: str) -> ConsumeOutcome:
        submitted = code.strip()
        now = self._clock()
        with self._lock:
            record = self._records.get(identity)
            if record is None:
                return ConsumeOutcome.ABSENT
            if record.is_expired(now):
                del self._records[identity]
                return ConsumeOutcome.ABSENT
            if not record.matches(submitted):
                return ConsumeOutcome.MISMATCH
            del self._records[identity]
            return ConsumeOutcome.CONSUMED

    def delete(self, identity: str) -> bool:
        with self._lock:
            return self._records.pop(identity, None) is not None

    def list_active(self) -> List[OtpRecord]:
        now = self._clock()
        with self._lock:
            return [r for r in self._records.values() if not r.is_expired(now)]

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [k for k, r in self._records.items() if r.is_expired(now)]
            for identity in expired:
                del self._records[identity]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
