"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    ProfileNotFoundError,
    PasswordConfirmationError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import delete_user_account
from .profile_management import (
    get_profile,
    get_public_profile,
    update_profile,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'ProfileNotFoundError',
    'PasswordConfirmationError',
    # Services
    'register_user',
    'authenticate_user',
    'delete_user_account',
    'get_profile',
    'get_public_profile',
    'update_profile',
]
