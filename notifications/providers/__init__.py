"""
Adapter factory registration.

This module exposes a single `get_adapter_factory(key)` function that
returns the factory for the given adapter key. The dispatcher calls
`factory.create(template_renderer, enqueue_notifications, config)` on it.
"""

from .base import BaseNotificationAdapter, BaseTemplateRenderer, RenderedTemplate
from .twilio_sms import TwilioConfig, TwilioSmsAdapter, TwilioSmsAdapterFactory, TwilioSmsError

ADAPTER_FACTORIES = {
    TwilioSmsAdapter.key: TwilioSmsAdapterFactory,
}


def get_adapter_factory(key: str):
    """
    Return a factory instance for the given adapter key.

    Only "twilio-sms" is registered.
    """
    normalized = (key or "").strip().lower()

    factory_class = ADAPTER_FACTORIES.get(normalized)
    if factory_class is None:
        raise ValueError(f"Unsupported adapter: {key}")

    return factory_class()


__all__ = [
    "ADAPTER_FACTORIES",
    "BaseNotificationAdapter",
    "BaseTemplateRenderer",
    "RenderedTemplate",
    "TwilioConfig",
    "TwilioSmsAdapter",
    "TwilioSmsAdapterFactory",
    "TwilioSmsError",
    "get_adapter_factory",
]
