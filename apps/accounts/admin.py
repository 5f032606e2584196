# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import AdminPasswordChangeForm
from django.utils.html import format_html
from .models import User

LEDGER_FIELDS = ('credits', 'total_receipts_sent')


class LedgerSafePasswordChangeForm(AdminPasswordChangeForm):
    """Admin password reset that only writes the password column."""

    def save(self, commit=True):
        user = super().save(commit=False)
        if commit:
            user.save(update_fields=['password'])
        return user


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for User model.

    Shows each account's credit balance and send count. Credits are granted
    through the admin panel API so the grant limits apply; here they are
    read-only.
    """

    list_display = [
        'email',
        'first_name',
        'last_name',
        'credits_badge',
        'total_receipts_sent',
        'is_active_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'first_name',
        'last_name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'first_name', 'last_name', 'profile_image_url', 'password')
        }),
        ('Credits', {
            'fields': ('credits', 'total_receipts_sent'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'credits',
        'total_receipts_sent',
        'created_at',
        'updated_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    change_password_form = LedgerSafePasswordChangeForm

    def save_model(self, request, obj, form, change):
        """Edits write every column except the credit ledger."""
        if not change:
            super().save_model(request, obj, form, change)
            return
        obj.save(update_fields=[
            field.name
            for field in obj._meta.concrete_fields
            if not field.primary_key and field.name not in LEDGER_FIELDS
        ])

    def credits_badge(self, obj):
        """Display credit balance, red when the user cannot send."""
        colour = '#6B8E5E' if obj.has_credits() else '#B85C5C'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colour,
            obj.credits,
        )
    credits_badge.short_description = 'Credits'
    credits_badge.admin_order_field = 'credits'

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        colour, label = ('#6B8E5E', 'Active') if obj.is_active else ('#B85C5C', 'Inactive')
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colour,
            label,
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    actions = ['activate_users', 'deactivate_users']

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        """Activate selected users."""
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (excludes superusers)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
