"""OTP API 路由测试"""

import pytest
from unittest.mock import Mock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from interfaces.api.routes.otp import (
    router,
    set_send_otp_handler_getter,
    set_verify_otp_handler_getter,
    VerifyOtpRequestDTO,
)
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


@pytest.fixture
def mock_send_handler() -> Mock:
    """创建 Mock SendOtpHandler"""
    return Mock(spec=SendOtpHandler)


@pytest.fixture
def mock_verify_handler() -> Mock:
    """创建 Mock VerifyOtpHandler"""
    return Mock(spec=VerifyOtpHandler)


@pytest.fixture
def client(mock_send_handler: Mock, mock_verify_handler: Mock):
    """创建测试客户端"""
    app = FastAPI()
    app.include_router(router)

    set_send_otp_handler_getter(lambda: mock_send_handler)
    set_verify_otp_handler_getter(lambda: mock_verify_handler)

    yield TestClient(app)

    set_send_otp_handler_getter(None)
    set_verify_otp_handler_getter(None)


class TestSendOtpEndpoint:
    """POST /send-otp 端点测试"""

    def test_success(self, client: TestClient, mock_send_handler: Mock):
        """测试签发成功"""
        mock_send_handler.handle.return_value = SendOtpResult(
            success=True,
            message="OTP sent successfully",
            email="user@example.com",
        )

        response = client.post("/send-otp", json={"email": "user@example.com"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "OTP sent successfully"}
        mock_send_handler.handle.assert_called_once_with(
            SendOtpCommand(email="user@example.com")
        )

    def test_success_with_echoed_otp(self, client: TestClient, mock_send_handler: Mock):
        """测试开启回显时响应包含验证码"""
        mock_send_handler.handle.return_value = SendOtpResult(
            success=True,
            message="OTP sent successfully",
            email="user@example.com",
            otp="123456",
        )

        response = client.post("/send-otp", json={"email": "user@example.com"})

        assert response.json()["otp"] == "123456"

    def test_missing_email_passes_none_to_handler(
        self, client: TestClient, mock_send_handler: Mock
    ):
        """测试缺少 email 字段时交由 handler 判断"""
        mock_send_handler.handle.return_value = SendOtpResult(
            success=False,
            message="Email is required",
            error_code="INVALID_INPUT",
        )

        response = client.post("/send-otp", json={})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Email is required"}
        mock_send_handler.handle.assert_called_once_with(SendOtpCommand(email=None))

    def test_delivery_failure_returns_500(
        self, client: TestClient, mock_send_handler: Mock
    ):
        """测试投递失败返回 500 和错误详情"""
        mock_send_handler.handle.return_value = SendOtpResult(
            success=False,
            message="Failed to send OTP",
            email="user@example.com",
            error_code="DELIVERY_FAILED",
            error="SMTP connection failed: refused",
        )

        response = client.post("/send-otp", json={"email": "user@example.com"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Failed to send OTP",
            "error": "SMTP connection failed: refused",
        }

    def test_unexpected_exception_returns_500(
        self, client: TestClient, mock_send_handler: Mock
    ):
        """测试 handler 抛出异常时返回 500"""
        mock_send_handler.handle.side_effect = RuntimeError("boom")

        response = client.post("/send-otp", json={"email": "user@example.com"})

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to send OTP"
        assert response.json()["error"] == "boom"

    def test_handler_not_configured(self, client: TestClient):
        """测试未配置 handler 时返回 500"""
        set_send_otp_handler_getter(None)

        response = client.post("/send-otp", json={"email": "user@example.com"})

        assert response.status_code == 500


class TestVerifyOtpEndpoint:
    """POST /verify-otp 端点测试"""

    def test_success(self, client: TestClient, mock_verify_handler: Mock):
        """测试校验成功"""
        mock_verify_handler.handle.return_value = VerifyOtpResult(
            success=True,
            message="OTP verified successfully",
        )

        response = client.post(
            "/verify-otp", json={"email": "user@example.com", "otp": "123456"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "OTP verified successfully"}
        mock_verify_handler.handle.assert_called_once_with(
            VerifyOtpCommand(email="user@example.com", otp="123456")
        )

    @pytest.mark.parametrize(
        "error_code,message",
        [
            ("INVALID_INPUT", "Email & OTP required"),
            ("OTP_NOT_FOUND", "OTP not found or expired"),
            ("OTP_INVALID", "Invalid OTP"),
        ],
    )
    def test_failures_return_400(
        self,
        client: TestClient,
        mock_verify_handler: Mock,
        error_code: str,
        message: str,
    ):
        """测试各类校验失败都返回 400"""
        mock_verify_handler.handle.return_value = VerifyOtpResult(
            success=False,
            message=message,
            error_code=error_code,
        )

        response = client.post(
            "/verify-otp", json={"email": "user@example.com", "otp": "000000"}
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": message}

    def test_numeric_otp_passed_as_string(
        self, client: TestClient, mock_verify_handler: Mock
    ):
        """测试数字形式的 otp 按字符串传递"""
        mock_verify_handler.handle.return_value = VerifyOtpResult(
            success=True,
            message="OTP verified successfully",
        )

        client.post("/verify-otp", json={"email": "user@example.com", "otp": 123456})

        mock_verify_handler.handle.assert_called_once_with(
            VerifyOtpCommand(email="user@example.com", otp="123456")
        )

    def test_unexpected_exception_returns_500(
        self, client: TestClient, mock_verify_handler: Mock
    ):
        """测试 handler 抛出异常时返回 500"""
        mock_verify_handler.handle.side_effect = RuntimeError("boom")

        response = client.post(
            "/verify-otp", json={"email": "user@example.com", "otp": "123456"}
        )

        assert response.status_code == 500
        assert response.json()["message"] == "OTP verification failed"


class TestVerifyOtpRequestDTO:
    """VerifyOtpRequestDTO 测试"""

    def test_int_otp_coerced(self):
        """测试整数 otp 转为字符串"""
        assert VerifyOtpRequestDTO(email="a@b.c", otp=123456).otp == "123456"

    def test_fields_optional(self):
        """测试字段均可缺省"""
        dto = VerifyOtpRequestDTO()

        assert dto.email is None
        assert dto.otp is None
