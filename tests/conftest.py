"""
Shared fixtures for adapter tests.
"""
from unittest.mock import AsyncMock

import pytest

from notifications.models import Notification
from notifications.providers import RenderedTemplate, TwilioConfig


@pytest.fixture
def twilio_config():
    return TwilioConfig(
        account_sid="AC_test_sid",
        auth_token="test_auth_token",
        from_number="+15551234567",
    )


@pytest.fixture
def template_renderer():
    renderer = AsyncMock()
    renderer.render.return_value = RenderedTemplate(subject="", body="Hello")
    return renderer


@pytest.fixture
def make_notification():
    """Build unsaved SMS notifications; no database access."""

    def _make(**overrides):
        fields = {
            "to": "+15559876543",
            "channel": "sms",
            "data": {},
            "status": "pending",
        }
        fields.update(overrides)
        return Notification(**fields)

    return _make
