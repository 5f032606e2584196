"""Domain exceptions for adminpanel app."""


class AdminPanelServiceError(Exception):
    """Base exception for all admin panel service errors."""
    pass


class InvalidAdminCredentialsError(AdminPanelServiceError):
    """Username or password is wrong."""
    pass


class AdminTokenError(AdminPanelServiceError):
    """Admin token is malformed, tampered with, expired or revoked."""
    pass


class UserNotFoundError(AdminPanelServiceError):
    """Target user does not exist."""
    pass


class InvalidCreditAmountError(AdminPanelServiceError):
    """Credit grant outside the allowed range."""
    pass


class AdminAlreadyExistsError(AdminPanelServiceError):
    """An admin with this username is already provisioned."""
    pass
