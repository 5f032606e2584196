from django import template

from apps.receipts.services.money import format_minor_units

register = template.Library()


@register.filter
def minor_units(value):
    """Format an integer amount in cents as ``12.34``."""
    if value in (None, ''):
        return ''
    return format_minor_units(value)
