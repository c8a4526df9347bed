"""过期 OTP 后台清理服务"""

import asyncio
import logging
from typing import Optional

from domain.otp.repositories.otp_store import OtpStore


class AsyncOtpSweeperService:
    """
    异步过期 OTP 清理服务

    使用 asyncio 周期性清理已过期的凭证，回收内存：
    - 过期判定以读取时检查为准，清理只是回收，不影响正确性
    - 单次清理失败只记录日志，不中断循环
    - 优雅停止
    """

    DEFAULT_INTERVAL: float = 60.0

    def __init__(
        self,
        store: OtpStore,
        interval: float = DEFAULT_INTERVAL,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化清理服务

        Args:
            store: OTP 凭证存储
            interval: 清理间隔（秒）
            logger: 可选的日志记录器
        """
        if interval <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval}")
        self._store = store
        self._interval = interval
        self._logger = logger or logging.getLogger(__name__)

        self._task: Optional[asyncio.Task] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """检查清理服务是否正在运行"""
        return self._running and self._task is not None

    @property
    def interval(self) -> float:
        """获取清理间隔（秒）"""
        return self._interval

    async def start(self) -> None:
        """启动清理服务"""
        if self._running:
            self._logger.warning("OTP sweeper already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._sweep_loop())
        self._logger.info(f"OTP sweeper started (interval={self._interval}s)")

    async def stop(self) -> None:
        """停止清理服务（优雅关闭）"""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._logger.info("OTP sweeper stopped")

    def sweep_once(self) -> int:
        """
        执行一次清理

        Returns:
            被清理的记录数，失败时返回 0
        """
        try:
            removed = self._store.purge_expired()
        except Exception as e:
            self._logger.error(f"OTP sweep failed: {e}")
            return 0

        if removed:
            self._logger.info(f"Purged {removed} expired OTP(s)")
        return removed

    async def _sweep_loop(self) -> None:
        """清理主循环"""
        while self._running:
            await asyncio.sleep(self._interval)
            if self._running:  # 再次检查，防止 sleep 期间被停止
                self.sweep_once()
