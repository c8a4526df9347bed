"""调试 API 路由（仅非生产环境启用）"""

from typing import Callable, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from application.handlers.otp.list_pending_otps_handler import ListPendingOtpsHandler
from application.queries.otp.list_pending_otps import ListPendingOtpsQuery


router = APIRouter(tags=["Debug"])


# ============ Handler 依赖注入 ============

_list_pending_handler_getter: Optional[Callable[[], ListPendingOtpsHandler]] = None
_reveal_codes: bool = False


def set_list_pending_handler_getter(
    getter: Optional[Callable[[], ListPendingOtpsHandler]],
    reveal_codes: bool = False,
) -> None:
    """设置 list-pending handler 获取器，以及是否显示验证码明文"""
    global _list_pending_handler_getter, _reveal_codes
    _list_pending_handler_getter = getter
    _reveal_codes = reveal_codes


def get_list_pending_handler() -> Optional[ListPendingOtpsHandler]:
    """获取 ListPendingOtpsHandler 实例"""
    if _list_pending_handler_getter is None:
        return None
    return _list_pending_handler_getter()


# ============ Response DTOs ============


class PendingOtpDTO(BaseModel):
    """待验证 OTP DTO"""

    otp: str = Field(..., description="验证码或 HIDDEN")
    expires_at: str = Field(..., description="过期时间 (ISO 格式)")
    expires_in: int = Field(..., description="剩余有效秒数")


# ============ API Endpoints ============


@router.get(
    "/__debug/otps",
    response_model=Dict[str, PendingOtpDTO],
    summary="查看待验证 OTP",
    description="列出当前所有未过期的验证码。仅用于本地调试，生产环境不要开启。",
)
def list_pending_otps(
    handler: Optional[ListPendingOtpsHandler] = Depends(get_list_pending_handler),
) -> Dict[str, PendingOtpDTO]:
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    items = handler.handle(ListPendingOtpsQuery(reveal_codes=_reveal_codes))
    return {
        item.email: PendingOtpDTO(
            otp=item.otp,
            expires_at=item.expires_at.isoformat(),
            expires_in=item.expires_in,
        )
        for item in items
    }
