import uuid
from django.db import models
from django.core.validators import MinLengthValidator


CHANNEL_CHOICES = [
    ("email", "Email"),
    ("sms", "SMS"),
]


class Template(models.Model):
    """
    Notification templates.
    Templates define the structure of notifications with variable placeholders.
    """
    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Template name/identifier"
    )
    channel = models.CharField(
        max_length=20,
        choices=CHANNEL_CHOICES,
        help_text="Notification channel type"
    )
    subject = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Subject line (unused for SMS)"
    )
    body = models.TextField(
        validators=[MinLengthValidator(1)],
        help_text="Template body with variable placeholders (e.g., {{name}}, {{code}})"
    )
    variables = models.JSONField(
        default=dict,
        blank=True,
        help_text="JSON schema or description of expected variables"
    )
    is_active = models.BooleanField(default=True, help_text="Whether this template is active")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "templates"
        verbose_name = "Template"
        verbose_name_plural = "Templates"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.channel})"


class Notification(models.Model):
    """
    A single notification as handed to a channel adapter.

    The dispatcher owns this record and its status; adapters only read it.
    """
    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("processing", "Processing"),
        ("sent", "Sent"),
        ("failed", "Failed"),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification"
    )
    template = models.ForeignKey(
        Template,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
        help_text="Template used for this notification (optional)"
    )
    channel = models.CharField(
        max_length=20,
        choices=CHANNEL_CHOICES,
        help_text="Notification channel"
    )
    to = models.CharField(
        max_length=255,
        help_text="Recipient address (email or E.164 phone number)"
    )
    data = models.JSONField(
        default=dict,
        blank=True,
        help_text="Template variables and inline subject/body"
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default="pending",
        help_text="Current status of the notification"
    )
    error_message = models.TextField(
        blank=True,
        null=True,
        help_text="Error message if the notification failed"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    sent_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Timestamp when the notification was successfully sent"
    )

    class Meta:
        db_table = "notifications"
        verbose_name = "Notification"
        verbose_name_plural = "Notifications"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="notif_status_created_idx"),
        ]

    def __str__(self):
        return f"Notification {self.id} - {self.channel} ({self.status})"
