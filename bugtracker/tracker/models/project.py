import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from .mixins import TimeStampedModel


class ProjectPriority(models.TextChoices):
    LOW = "LOW", "Low"
    MEDIUM = "MEDIUM", "Medium"
    HIGH = "HIGH", "High"
    CRITICAL = "CRITICAL", "Critical"

    @classmethod
    def from_input(cls, raw) -> "ProjectPriority":
        """Resolve a request value by enum value or display label (case-insensitive)."""
        text = str(raw or "").strip().lower()
        for member in cls:
            if text in (member.value.lower(), member.label.lower()):
                return member
        raise ValidationError(f"Unknown project priority: {raw!r}")


class Project(TimeStampedModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    priority = models.CharField(
        max_length=10,
        choices=ProjectPriority.choices,
        default=ProjectPriority.MEDIUM,
    )
    start_date = models.DateField(editable=False)
    deadline = models.DateField(null=True, blank=True, db_index=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="owned_projects",
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="projects",
        blank=True,
    )

    class Meta:
        db_table = "projects"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["priority"], name="projects_priority_idx"),
        ]

    def __str__(self):
        return f"{self.title} [{self.get_priority_display()}]"
