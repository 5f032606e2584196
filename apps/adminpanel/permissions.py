from rest_framework import permissions
from .models import AdminUser


class IsPanelAdmin(permissions.BasePermission):
    """Only requests authenticated with an admin token."""

    message = 'Admin access required.'

    def has_permission(self, request, view):
        return isinstance(request.user, AdminUser)
