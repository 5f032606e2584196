"""Domain exceptions for receipts app."""


class ReceiptsServiceError(Exception):
    """Base exception for all receipts service errors."""
    pass


class InvalidReceiptDataError(ReceiptsServiceError):
    """Receipt input is missing or outside its allowed range."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class InsufficientCreditsError(ReceiptsServiceError):
    """User has no credits left to send a receipt."""
    pass


class ReceiptStorageError(ReceiptsServiceError):
    """Receipt row could not be written."""
    pass
