"""Login for marketplace accounts."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
import logging

from ..models import Profile, UserType
from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check credentials and stamp the login time.

    Accounts created outside registration (``createsuperuser``, the admin)
    have no profile yet. They get a buyer-and-seller profile on first
    login, so the returned user can always be serialized with its profile.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Account was deactivated or deleted
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=email)
        .first()
    )
    if user is None or not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    _, created = Profile.objects.get_or_create(
        user=user,
        defaults={'user_type': UserType.BOTH},
    )
    if created:
        logger.info("Created missing profile for %s on login", user.id)

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
