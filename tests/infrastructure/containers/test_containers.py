"""DI 容器测试"""

import pytest

from application.commands.otp.send_otp import SendOtpHandler
from application.commands.otp.verify_otp import VerifyOtpHandler
from application.handlers.otp.list_pending_otps_handler import ListPendingOtpsHandler
from application.otp.services.otp_sweeper_service import AsyncOtpSweeperService
from domain.common.exceptions import OtpSenderConfigurationException
from infrastructure.config.settings import Settings
from infrastructure.containers import bootstrap
from infrastructure.otp.senders.brevo_otp_sender import BrevoOtpSender
from infrastructure.otp.senders.smtp_otp_sender import SmtpOtpSender
from infrastructure.otp.stores.in_memory_otp_store import InMemoryOtpStore


def make_settings(**overrides) -> Settings:
    """创建测试配置"""
    values = dict(
        _env_file=None,
        app_env="test",
        email_user="bot@example.com",
        email_pass="secret",
        brevo_api_key="xkeysib-test",
    )
    values.update(overrides)
    return Settings(**values)


class TestSenderSelection:
    """投递通道选择测试"""

    def test_smtp_selected(self):
        """测试 EMAIL_PROVIDER=smtp 选择 SMTP 实现"""
        boot = bootstrap(make_settings(email_provider="smtp"))

        assert isinstance(boot.infra.otp_sender(), SmtpOtpSender)

    def test_gmail_selects_smtp(self):
        """测试 EMAIL_PROVIDER=gmail 选择 SMTP 实现"""
        boot = bootstrap(make_settings(email_provider="gmail"))

        assert isinstance(boot.infra.otp_sender(), SmtpOtpSender)

    def test_brevo_selected(self):
        """测试 EMAIL_PROVIDER=brevo 选择 Brevo 实现"""
        boot = bootstrap(make_settings(email_provider="brevo"))

        assert isinstance(boot.infra.otp_sender(), BrevoOtpSender)

    def test_sender_is_singleton(self):
        """测试投递通道只创建一次"""
        boot = bootstrap(make_settings(email_provider="brevo"))

        assert boot.infra.otp_sender() is boot.infra.otp_sender()

    def test_missing_brevo_key_raises_configuration_error(self):
        """测试缺少 API Key 时创建失败"""
        boot = bootstrap(make_settings(email_provider="brevo", brevo_api_key=""))

        with pytest.raises(OtpSenderConfigurationException):
            boot.infra.otp_sender()


class TestHandlerWiring:
    """Handler 装配测试"""

    def test_handlers_share_store(self):
        """测试所有 handler 共享同一个存储单例"""
        boot = bootstrap(make_settings())

        store = boot.infra.otp_store()

        assert isinstance(store, InMemoryOtpStore)
        assert boot.app.send_otp_handler()._store is store
        assert boot.app.verify_otp_handler()._store is store
        assert boot.app.list_pending_otps_handler()._store is store
        assert boot.app.otp_sweeper_service()._store is store

    def test_handler_types(self):
        """测试容器创建的 handler 类型"""
        boot = bootstrap(make_settings())

        assert isinstance(boot.app.send_otp_handler(), SendOtpHandler)
        assert isinstance(boot.app.verify_otp_handler(), VerifyOtpHandler)
        assert isinstance(boot.app.list_pending_otps_handler(), ListPendingOtpsHandler)
        assert isinstance(boot.app.otp_sweeper_service(), AsyncOtpSweeperService)

    def test_send_handler_reads_settings(self):
        """测试签发 handler 读取配置"""
        boot = bootstrap(
            make_settings(
                otp_expiry_seconds=120,
                return_otp_in_response=True,
                otp_rollback_on_delivery_failure=True,
            )
        )

        handler = boot.app.send_otp_handler()

        assert handler._ttl_seconds == 120
        assert handler._echo_otp is True
        assert handler._rollback_on_delivery_failure is True

    def test_separate_bootstraps_have_separate_stores(self):
        """测试不同 bootstrap 之间存储互相独立"""
        first = bootstrap(make_settings())
        second = bootstrap(make_settings())

        assert first.infra.otp_store() is not second.infra.otp_store()

    def test_send_handler_built_without_transport_credentials(self):
        """测试投递通道未配置时仍能创建签发 handler"""
        boot = bootstrap(make_settings(email_provider="brevo", brevo_api_key=""))

        handler = boot.app.send_otp_handler()

        assert isinstance(handler, SendOtpHandler)
        with pytest.raises(OtpSenderConfigurationException):
            handler._sender_provider()

    def test_send_handler_resolves_selected_sender(self):
        """测试签发 handler 延迟获取选定的投递通道单例"""
        boot = bootstrap(make_settings(email_provider="brevo"))

        handler = boot.app.send_otp_handler()

        assert handler._sender_provider() is boot.infra.otp_sender()
