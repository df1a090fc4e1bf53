from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.TextChoices):
    ADMIN = "ADMIN", "Admin"
    MANAGER = "MANAGER", "Manager"
    DEVELOPER = "DEVELOPER", "Developer"


class User(AbstractUser):
    email = models.EmailField(unique=True)
    full_name = models.CharField(max_length=255, blank=True)
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.DEVELOPER, db_index=True)

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self):
        return f"{self.full_name or self.username} <{self.email}>"

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def can_manage_projects(self) -> bool:
        return self.role in {Role.ADMIN, Role.MANAGER}
