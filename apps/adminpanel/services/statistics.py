"""Statistics service - admin dashboard totals."""

from django.db.models import Sum

from apps.accounts.models import User
from apps.receipts.models import Receipt


def get_panel_stats() -> dict:
    """
    Summary numbers for the admin dashboard.

    Returns:
        Dictionary with:
        - total_users: int
        - total_receipts: int
        - failed_deliveries: int - receipts with email_sent=False
        - credits_outstanding: int - unspent credits across all users
    """
    return {
        'total_users': User.objects.count(),
        'total_receipts': Receipt.objects.count(),
        'failed_deliveries': Receipt.objects.filter(email_sent=False).count(),
        'credits_outstanding': User.objects.aggregate(total=Sum('credits'))['total'] or 0,
    }
