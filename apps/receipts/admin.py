from django.contrib import admin
from django.utils.html import format_html
from .models import Receipt
from .services import format_minor_units


@admin.register(Receipt)
class ReceiptAdmin(admin.ModelAdmin):
    """
    Admin interface for Receipt model.

    Receipts are immutable once created; every field is read-only and
    receipts cannot be added or deleted from the admin.
    """

    list_display = [
        'order_number',
        'product_name',
        'customer_email',
        'user',
        'total_display',
        'email_status_badge',
        'created_at',
    ]

    list_filter = ['email_sent', 'created_at']
    search_fields = ['order_number', 'customer_email', 'customer_name', 'product_name', 'user__email']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    list_select_related = ['user']

    fieldsets = (
        ('Customer', {
            'fields': ('user', 'customer_name', 'customer_email', 'billing_address')
        }),
        ('Product', {
            'fields': ('product_name', 'product_image_url', 'product_price', 'quantity')
        }),
        ('Amounts (cents, tax rate in basis points)', {
            'fields': ('tax_rate', 'shipping', 'subtotal', 'tax', 'total')
        }),
        ('Delivery', {
            'fields': ('order_number', 'email_sent', 'email_sent_at', 'created_at')
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        return [field.name for field in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def total_display(self, obj):
        return f"${format_minor_units(obj.total)}"
    total_display.short_description = 'Total'
    total_display.admin_order_field = 'total'

    def email_status_badge(self, obj):
        """Display delivery status as colored badge."""
        colour, label = ('#6B8E5E', 'Sent') if obj.email_sent else ('#B85C5C', 'Failed')
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            colour,
            label,
        )
    email_status_badge.short_description = 'Email'
    email_status_badge.admin_order_field = 'email_sent'
