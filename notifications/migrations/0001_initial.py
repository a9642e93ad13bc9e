import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Template",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Template name/identifier", max_length=255, unique=True)),
                ("channel", models.CharField(choices=[("email", "Email"), ("sms", "SMS")], help_text="Notification channel type", max_length=20)),
                ("subject", models.CharField(blank=True, help_text="Subject line (unused for SMS)", max_length=255, null=True)),
                ("body", models.TextField(help_text="Template body with variable placeholders (e.g., {{name}}, {{code}})", validators=[django.core.validators.MinLengthValidator(1)])),
                ("variables", models.JSONField(blank=True, default=dict, help_text="JSON schema or description of expected variables")),
                ("is_active", models.BooleanField(default=True, help_text="Whether this template is active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Template",
                "verbose_name_plural": "Templates",
                "db_table": "templates",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, help_text="Unique identifier for the notification", primary_key=True, serialize=False)),
                ("channel", models.CharField(choices=[("email", "Email"), ("sms", "SMS")], help_text="Notification channel", max_length=20)),
                ("to", models.CharField(help_text="Recipient address (email or E.164 phone number)", max_length=255)),
                ("data", models.JSONField(blank=True, default=dict, help_text="Template variables and inline subject/body")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("processing", "Processing"), ("sent", "Sent"), ("failed", "Failed")], default="pending", help_text="Current status of the notification", max_length=20)),
                ("error_message", models.TextField(blank=True, help_text="Error message if the notification failed", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("sent_at", models.DateTimeField(blank=True, help_text="Timestamp when the notification was successfully sent", null=True)),
                ("template", models.ForeignKey(blank=True, help_text="Template used for this notification (optional)", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="notifications", to="notifications.template")),
            ],
            options={
                "verbose_name": "Notification",
                "verbose_name_plural": "Notifications",
                "db_table": "notifications",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status", "created_at"], name="notif_status_created_idx")],
            },
        ),
    ]
