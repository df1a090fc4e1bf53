from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsAdminOrManager(BasePermission):
    """
    Writes (create/update project) only for ADMIN or MANAGER; reads pass through.
    """
    message = "Only admins and managers can manage projects."

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        u = request.user
        return bool(u and u.is_authenticated and getattr(u, "can_manage_projects", False))
