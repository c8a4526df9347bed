"""OTP 签发与校验 API 路由"""

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from application.commands.otp.send_otp import (
    SendOtpCommand,
    SendOtpHandler,
    SendOtpResult,
)
from application.commands.otp.verify_otp import (
    VerifyOtpCommand,
    VerifyOtpHandler,
    VerifyOtpResult,
)


router = APIRouter(tags=["OTP"])

logger = logging.getLogger(__name__)


# ============ Handler 依赖注入 ============

_send_otp_handler_getter: Optional[Callable[[], SendOtpHandler]] = None


def set_send_otp_handler_getter(getter: Optional[Callable[[], SendOtpHandler]]) -> None:
    """设置 send-otp handler 获取器（由 DI 容器调用）"""
    global _send_otp_handler_getter
    _send_otp_handler_getter = getter


def get_send_otp_handler() -> Optional[SendOtpHandler]:
    """获取 SendOtpHandler 实例"""
    if _send_otp_handler_getter is None:
        return None
    return _send_otp_handler_getter()


_verify_otp_handler_getter: Optional[Callable[[], VerifyOtpHandler]] = None


def set_verify_otp_handler_getter(
    getter: Optional[Callable[[], VerifyOtpHandler]]
) -> None:
    """设置 verify-otp handler 获取器（由 DI 容器调用）"""
    global _verify_otp_handler_getter
    _verify_otp_handler_getter = getter


def get_verify_otp_handler() -> Optional[VerifyOtpHandler]:
    """获取 VerifyOtpHandler 实例"""
    if _verify_otp_handler_getter is None:
        return None
    return _verify_otp_handler_getter()


# ============ Request/Response DTOs ============


class SendOtpRequestDTO(BaseModel):
    """签发 OTP 请求 DTO

    字段缺失时由 handler 返回 400，而不是框架默认的 422。

    Attributes:
        email: 邮箱地址
    """

    email: Optional[str] = Field(
        default=None,
        description="邮箱地址",
        examples=["user@example.com"],
    )


class VerifyOtpRequestDTO(BaseModel):
    """校验 OTP 请求 DTO

    Attributes:
        email: 邮箱地址
        otp: 用户收到的验证码（数字也按十进制字符串处理）
    """

    email: Optional[str] = Field(
        default=None,
        description="邮箱地址",
        examples=["user@example.com"],
    )
    otp: Optional[str] = Field(
        default=None,
        description="验证码",
        examples=["123456"],
    )

    @field_validator("otp", mode="before")
    @classmethod
    def _coerce_numeric_otp(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SendOtpResponseDTO(BaseModel):
    """签发 OTP 响应 DTO

    Attributes:
        success: 固定为 True
        message: 结果消息
        otp: 验证码（仅在非生产调试配置下返回）
    """

    success: bool = Field(default=True, description="是否成功")
    message: str = Field(..., description="结果消息")
    otp: Optional[str] = Field(default=None, description="验证码（调试回显）")


class VerifyOtpResponseDTO(BaseModel):
    """校验 OTP 响应 DTO"""

    success: bool = Field(default=True, description="是否成功")
    message: str = Field(..., description="结果消息")


class ErrorResponseDTO(BaseModel):
    """错误响应 DTO"""

    success: bool = Field(default=False, description="固定为 False")
    message: str = Field(..., description="错误消息")
    error: Optional[str] = Field(default=None, description="错误详情")


# ============ 错误码映射 ============

ERROR_CODE_TO_STATUS = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "OTP_NOT_FOUND": status.HTTP_400_BAD_REQUEST,
    "OTP_INVALID": status.HTTP_400_BAD_REQUEST,
    "DELIVERY_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# 请求体无法解析时各端点返回的消息
INVALID_REQUEST_MESSAGES = {
    "/send-otp": "Email is required",
    "/verify-otp": "Email & OTP required",
}


def error_response(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    """构建统一格式的错误响应"""
    body = ErrorResponseDTO(message=message, error=error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


# ============ API Endpoints ============


@router.post(
    "/send-otp",
    response_model=SendOtpResponseDTO,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponseDTO, "description": "邮箱缺失"},
        500: {"model": ErrorResponseDTO, "description": "邮件投递失败"},
    },
    summary="签发 OTP",
    description="""
    为邮箱生成 6 位验证码并通过配置的通道发送。

    **流程：**
    1. 规范化邮箱（去除首尾空白、转小写）
    2. 生成验证码并写入存储（替换该邮箱已有的验证码）
    3. 通过 SMTP 或 Brevo API 发送邮件

    **注意：**
    - 投递失败返回 500，已写入的验证码默认仍然有效
    - 仅在调试配置下响应中包含 `otp`
    """,
)
def send_otp(
    request: SendOtpRequestDTO,
    handler: Optional[SendOtpHandler] = Depends(get_send_otp_handler),
):
    """签发 OTP"""
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    # 创建命令
    command = SendOtpCommand(email=request.email)

    # 执行命令
    try:
        result: SendOtpResult = handler.handle(command)
    except Exception as e:
        logger.exception("Unexpected send-otp error")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to send OTP", str(e)
        )

    # 处理结果
    if not result.success:
        status_code = ERROR_CODE_TO_STATUS.get(
            result.error_code,
            status.HTTP_400_BAD_REQUEST,
        )
        return error_response(status_code, result.message, result.error)

    return SendOtpResponseDTO(message=result.message, otp=result.otp)


@router.post(
    "/verify-otp",
    response_model=VerifyOtpResponseDTO,
    responses={
        400: {"model": ErrorResponseDTO, "description": "参数缺失、验证码不存在/已过期或错误"},
        500: {"model": ErrorResponseDTO, "description": "内部错误"},
    },
    summary="校验 OTP",
    description="""
    校验用户提交的验证码。

    **结果说明：**
    - **200**: 校验通过，验证码被消费，不能再次使用
    - **400 OTP not found or expired**: 未签发、已过期或已被使用
    - **400 Invalid OTP**: 验证码错误，原验证码在有效期内仍可使用
    """,
)
def verify_otp(
    request: VerifyOtpRequestDTO,
    handler: Optional[VerifyOtpHandler] = Depends(get_verify_otp_handler),
):
    """校验 OTP"""
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    command = VerifyOtpCommand(email=request.email, otp=request.otp)

    try:
        result: VerifyOtpResult = handler.handle(command)
    except Exception as e:
        logger.exception("Unexpected verify-otp error")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "OTP verification failed", str(e)
        )

    if not result.success:
        status_code = ERROR_CODE_TO_STATUS.get(
            result.error_code,
            status.HTTP_400_BAD_REQUEST,
        )
        return error_response(status_code, result.message)

    return VerifyOtpResponseDTO(message=result.message)
