"""Account management service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
from uuid import UUID
import logging

from apps.listings.models import Product, ListingStatus
from apps.requests.models import BuyerRequest, RequestStatus, Offer, OfferStatus
from .exceptions import PasswordConfirmationError, UserNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_user_account(*, user_id: UUID, password: str) -> None:
    """
    Delete an account by anonymizing it.

    Orders, reviews and messages keep pointing at the (now anonymous) user
    so the other party's history stays intact. Whatever the user still has
    on the market is taken off it: open requests are closed, pending offers
    withdrawn and active listings deactivated.

    Args:
        user_id: User's ID
        password: User's password for confirmation

    Raises:
        UserNotFoundError: If the user does not exist
        PasswordConfirmationError: If password is incorrect
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found")

    if not user.check_password(password):
        raise PasswordConfirmationError("Invalid password")

    now = timezone.now()
    closed = BuyerRequest.objects.filter(
        buyer=user, status=RequestStatus.OPEN
    ).update(status=RequestStatus.CLOSED, updated_at=now)
    withdrawn = Offer.objects.filter(
        seller=user, status=OfferStatus.PENDING
    ).update(status=OfferStatus.WITHDRAWN, updated_at=now)
    deactivated = Product.objects.filter(
        seller=user, status=ListingStatus.ACTIVE
    ).update(status=ListingStatus.INACTIVE, updated_at=now)

    user.anonymize()
    logger.info(
        "Anonymized account %s (closed %d requests, withdrew %d offers, deactivated %d listings)",
        user_id, closed, withdrawn, deactivated,
    )
