"""Read-side receipt queries."""

from typing import Optional

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.receipts.models import Receipt


def get_user_receipts(*, user: User) -> QuerySet[Receipt]:
    """Receipts owned by user, newest first."""
    return Receipt.objects.filter(user=user).order_by('-created_at')


def get_all_receipts(*, email_sent: Optional[bool] = None) -> QuerySet[Receipt]:
    """
    All receipts, newest first, for the admin panel.

    Args:
        email_sent: Only receipts with this delivery status; False lists
            failed deliveries awaiting follow-up
    """
    queryset = Receipt.objects.select_related('user').order_by('-created_at')
    if email_sent is not None:
        queryset = queryset.filter(email_sent=email_sent)
    return queryset
