"""Errors raised by the accounts services and mapped to HTTP by the views."""


class AccountsServiceError(Exception):
    """Base exception for account operations."""


class EmailAlreadyRegisteredError(AccountsServiceError):
    """Another account already uses this email (compared case-insensitively)."""


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password; the two are not distinguished."""


class InactiveAccountError(AccountsServiceError):
    """Password matched but the account has been switched off."""
