"""Unit tests for StubEmailService and ConsoleAdapter helpers.

Secrets must never reach log output: the stub email keeps only a token
prefix and the console adapter masks secret-looking keys.
"""

import pytest

from src.infrastructure.email.stub_email_service import StubEmailService
from src.infrastructure.logging.console_adapter import ConsoleAdapter, _mask_secrets


@pytest.mark.unit
class TestStubEmailService:
    @pytest.mark.asyncio
    async def test_reset_email_logs_token_prefix_only(self, mock_logger):
        service = StubEmailService(logger=mock_logger)

        await service.send_password_reset_email("ann@example.com", "a" * 64)

        mock_logger.info.assert_called_once_with(
            "password_reset_email_sent",
            to_email="ann@example.com",
            token_prefix="aaaaaaaa",
            transport="stub",
        )

    @pytest.mark.asyncio
    async def test_password_changed_notification(self, mock_logger):
        service = StubEmailService(logger=mock_logger)

        await service.send_password_changed_notification("ann@example.com")

        event = mock_logger.info.call_args.args[0]
        assert event == "password_changed_email_sent"


@pytest.mark.unit
class TestConsoleAdapterProcessors:
    def test_mask_secrets(self):
        event = {
            "event": "login_failed",
            "email": "ann@example.com",
            "password": "Secret123",
            "reset_token": "f" * 64,
        }

        masked = _mask_secrets(None, "info", event)

        assert masked["password"] == "***"
        assert masked["reset_token"] == "***"
        assert masked["email"] == "ann@example.com"

    def test_with_error_adds_type_and_message(self):
        context = ConsoleAdapter._with_error(ValueError("boom"), {"operation": "login"})

        assert context == {
            "operation": "login",
            "error_type": "ValueError",
            "error_message": "boom",
        }

    def test_with_error_none_leaves_context(self):
        assert ConsoleAdapter._with_error(None, {"a": 1}) == {"a": 1}
