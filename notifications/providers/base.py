"""
Base adapter and template renderer interfaces.

Each channel adapter should inherit from `BaseNotificationAdapter` and
implement the async `send` method. Adapters receive their template
renderer at construction time and only depend on `BaseTemplateRenderer`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RenderedTemplate:
    """
    Result of rendering a notification template.

    Produced fresh for every send; never cached or persisted.
    """

    body: str
    subject: str | None = None


class BaseTemplateRenderer(ABC):
    """Turns a notification and a context mapping into a subject/body pair."""

    @abstractmethod
    async def render(self, notification: Any, context: Mapping[str, Any]) -> RenderedTemplate:
        raise NotImplementedError("render() must be implemented by subclasses")


class BaseNotificationAdapter(ABC):
    """
    Abstract channel adapter.

    Concrete adapters must set `key` and implement `send`.
    """

    key: str | None = None

    def __init__(
        self,
        template_renderer: BaseTemplateRenderer,
        notification_type: str,
        enqueue_notifications: bool,
    ):
        self.template_renderer = template_renderer
        self.notification_type = notification_type
        self.enqueue_notifications = enqueue_notifications

    @property
    def supports_attachments(self) -> bool:
        return False

    async def get_recipient(self, notification: Any) -> str:
        """Return the address stored on the notification (email, phone, etc.)."""
        return notification.to

    @abstractmethod
    async def send(self, notification: Any, context: Mapping[str, Any]) -> None:
        """
        Send a notification.

        Raises on any failure; the dispatcher decides whether to retry.
        """
        raise NotImplementedError("send() must be implemented by subclasses")
