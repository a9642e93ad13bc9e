"""
Jinja2-backed template renderer for notification adapters.
"""
from typing import Any, Mapping

from jinja2 import Template as Jinja2Template

from .providers.base import BaseTemplateRenderer, RenderedTemplate


class Jinja2TemplateRenderer(BaseTemplateRenderer):
    """
    Renders a notification's stored template, or its inline content.

    Variables come from the notification's `template_data`, overridden by
    the context passed to `render`.
    """

    async def render(self, notification, context: Mapping[str, Any]) -> RenderedTemplate:
        data = notification.data or {}
        variables = {**(data.get('template_data') or {}), **(context or {})}

        if notification.template:
            # Render from template
            template = notification.template
            body = Jinja2Template(template.body).render(**variables)
            subject = None
            if template.subject:
                subject = Jinja2Template(template.subject).render(**variables)
            return RenderedTemplate(body=body, subject=subject)

        # Use inline content
        inline_body = data.get('inline_body') or ''
        inline_subject = data.get('inline_subject')

        body = Jinja2Template(inline_body).render(**variables)
        subject = None
        if inline_subject:
            subject = Jinja2Template(inline_subject).render(**variables)

        return RenderedTemplate(body=body, subject=subject)
