from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import Project, Ticket, User


@admin.register(User)
class TrackerUserAdmin(UserAdmin):
    list_display = ("id", "email", "full_name", "role", "is_active")
    list_filter = ("role", "is_active")
    search_fields = ("email", "full_name", "username")
    fieldsets = UserAdmin.fieldsets + (("Tracker", {"fields": ("full_name", "role")}),)
    add_fieldsets = UserAdmin.add_fieldsets + (("Tracker", {"fields": ("email", "full_name", "role")}),)


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title", "priority", "owner", "start_date", "deadline")
    list_filter = ("priority",)
    search_fields = ("title",)
    filter_horizontal = ("members",)


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "project", "status", "priority", "assignee")
    list_filter = ("status", "priority")
    search_fields = ("title",)
