"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.debug import router as debug_router
from interfaces.api.routes.otp import router as otp_router

__all__ = ["debug_router", "otp_router"]
