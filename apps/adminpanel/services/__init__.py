"""Services for admin panel business logic."""

from .exceptions import (
    AdminPanelServiceError,
    InvalidAdminCredentialsError,
    AdminTokenError,
    UserNotFoundError,
    InvalidCreditAmountError,
    AdminAlreadyExistsError,
)
from .admin_authentication import (
    authenticate_admin,
    issue_admin_token,
    verify_admin_token,
    revoke_admin_tokens,
)
from .credit_management import grant_credits, get_all_users
from .statistics import get_panel_stats
from .provisioning import provision_admin

__all__ = [
    # Exceptions
    'AdminPanelServiceError',
    'InvalidAdminCredentialsError',
    'AdminTokenError',
    'UserNotFoundError',
    'InvalidCreditAmountError',
    'AdminAlreadyExistsError',
    # Authentication
    'authenticate_admin',
    'issue_admin_token',
    'verify_admin_token',
    'revoke_admin_tokens',
    # Credits and listings
    'grant_credits',
    'get_all_users',
    'get_panel_stats',
    # Provisioning
    'provision_admin',
]
