"""
API exceptions for receipts app.

Service-layer errors live in ``apps.receipts.services.exceptions``; views
translate them into these.
"""
from rest_framework.exceptions import APIException


class InsufficientCreditsAPIError(APIException):
    """User cannot afford another receipt."""
    status_code = 400
    default_detail = 'Insufficient credits. Please contact an administrator to add more credits.'
    default_code = 'insufficient_credits'


class ReceiptStorageAPIError(APIException):
    """Receipt could not be saved."""
    status_code = 500
    default_detail = 'Failed to create receipt.'
    default_code = 'receipt_storage_failed'
