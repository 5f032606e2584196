from django.contrib import admin
from .models import AdminUser


@admin.register(AdminUser)
class AdminUserAdmin(admin.ModelAdmin):
    """
    Read-only view of admin panel operators.

    Operators are created with ``manage.py provision_admin``.
    """

    list_display = ['username', 'created_at', 'last_login']
    search_fields = ['username']
    ordering = ['username']
    fields = ['username', 'created_at', 'last_login', 'token_version']
    readonly_fields = fields

    def has_add_permission(self, request):
        return False
