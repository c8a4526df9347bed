"""
日志配置

使用标准库 logging：控制台输出，配置 LOG_FILE 时同时写入文件。
各模块通过 logging.getLogger(__name__) 获取日志记录器。
"""

import logging
import os
from typing import Optional

from infrastructure.config.settings import Settings


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_HANDLER_MARK = "_otp_service_handler"


def configure_logging(settings: Settings, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    配置根日志记录器

    重复调用时替换之前安装的 handler，不会重复输出。

    Args:
        settings: 应用配置（读取 log_level / log_file）
        logger: 要配置的日志记录器，默认根记录器

    Returns:
        配置后的日志记录器
    """
    target = logger or logging.getLogger()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    target.setLevel(level)

    for handler in list(target.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            target.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    setattr(console, _HANDLER_MARK, True)
    target.addHandler(console)

    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARK, True)
        target.addHandler(file_handler)

    return target
