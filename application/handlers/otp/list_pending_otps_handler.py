"""列出待验证 OTP Handler"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional

from application.queries.otp.list_pending_otps import ListPendingOtpsQuery
from domain.otp.repositories.otp_store import OtpStore


HIDDEN_CODE = "HIDDEN"


@dataclass
class PendingOtpItem:
    """待验证 OTP 条目

    Attributes:
        email: 邮箱地址
        otp: 验证码或 "HIDDEN"
        expires_at: 过期时间
        expires_in: 剩余有效秒数
    """

    email: str
    otp: str
    expires_at: datetime
    expires_in: int


class ListPendingOtpsHandler:
    """列出待验证 OTP Handler

    处理 ListPendingOtpsQuery。只读，不修改存储。
    """

    def __init__(
        self,
        store: OtpStore,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        logger: Optional[logging.Logger] = None,
    ):
        self._store = store
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, query: ListPendingOtpsQuery) -> List[PendingOtpItem]:
        """处理查询请求

        Args:
            query: 查询对象

        Returns:
            按邮箱排序的待验证 OTP 列表
        """
        now = self._clock()
        records = sorted(self._store.list_active(), key=lambda r: r.identity)
        self._logger.debug(f"Listing {len(records)} pending OTPs")

        return [
            PendingOtpItem(
                email=record.identity,
                otp=record.code if query.reveal_codes else HIDDEN_CODE,
                expires_at=record.expires_at,
                expires_in=record.remaining_seconds(now),
            )
            for record in records
        ]
