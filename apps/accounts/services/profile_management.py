"""Profile read/update service."""

from django.db import transaction
from uuid import UUID
from typing import Dict, Any

from ..models import Profile
from .exceptions import ProfileNotFoundError


def get_profile(*, user_id: UUID) -> Profile:
    """
    Get a user's profile.

    Raises:
        ProfileNotFoundError: If the user has no profile
    """
    try:
        return Profile.objects.select_related('user').get(user_id=user_id)
    except Profile.DoesNotExist:
        raise ProfileNotFoundError(f"Profile {user_id} not found")


def get_public_profile(*, user_id: UUID) -> Profile:
    """
    Get a profile for display to other users.

    Deactivated accounts are hidden.

    Raises:
        ProfileNotFoundError: If missing or the account is inactive
    """
    try:
        return Profile.objects.select_related('user').get(
            user_id=user_id,
            user__is_active=True,
        )
    except Profile.DoesNotExist:
        raise ProfileNotFoundError(f"Profile {user_id} not found")


@transaction.atomic
def update_profile(*, user_id: UUID, data: Dict[str, Any]) -> Profile:
    """
    Update editable profile fields.

    Rating and review totals are maintained by the reviews app and are
    ignored here.

    Args:
        user_id: Owner of the profile
        data: Fields to update

    Returns:
        Updated Profile instance

    Raises:
        ProfileNotFoundError: If the user has no profile
    """
    try:
        profile = (
            Profile.objects
            .select_for_update()
            .get(user_id=user_id)
        )
    except Profile.DoesNotExist:
        raise ProfileNotFoundError(f"Profile {user_id} not found")

    allowed_fields = [
        'user_type', 'first_name', 'last_name',
        'avatar_url', 'bio', 'phone_number',
    ]

    for field, value in data.items():
        if field in allowed_fields:
            setattr(profile, field, value if value is not None else '')

    profile.save()
    return profile
