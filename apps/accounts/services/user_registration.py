"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
import logging

from ..models import Profile, UserType
from .exceptions import UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = "",
    user_type: str = UserType.BOTH,
    first_name: str = "",
    last_name: str = "",
    phone_number: str = ""
) -> User:
    """
    Register a new user together with their marketplace profile.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        display_name: Optional display name
        user_type: buyer, seller or both
        first_name: Optional first name for the profile
        last_name: Optional last name for the profile
        phone_number: Optional contact phone

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If registration fails
    """
    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            display_name=display_name
        )
    except IntegrityError:
        raise UserRegistrationError("Registration failed: email already registered")

    Profile.objects.create(
        user=user,
        user_type=user_type,
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
    )

    logger.info("Registered user %s as %s", user.id, user_type)
    return user
