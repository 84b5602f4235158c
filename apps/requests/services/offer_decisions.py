"""Buyer decisions on offers: accept or reject."""

from django.db import transaction
from uuid import UUID
import logging

from apps.accounts.models import User
from apps.notifications.models import NotificationType
from apps.notifications.services import notify_on_commit
from apps.orders.models import Order
from apps.orders.services import OrderService
from ..models import BuyerRequest, Offer, OfferStatus, RequestStatus
from .exceptions import (
    OfferNotFoundError,
    UnauthorizedOfferActionError,
    RequestNotOpenError,
    OfferNotPendingError,
)

logger = logging.getLogger(__name__)


def _lock_offer_and_request(*, offer_id: UUID, user: User) -> tuple[Offer, BuyerRequest]:
    """
    Lock the offer and its request for a buyer decision.

    Raises:
        OfferNotFoundError: If offer doesn't exist
        UnauthorizedOfferActionError: If user doesn't own the request
        OfferNotPendingError: If offer is not pending
        RequestNotOpenError: If request is not open
    """
    try:
        offer = Offer.objects.select_for_update().get(id=offer_id)
    except Offer.DoesNotExist:
        raise OfferNotFoundError("Offer not found")

    buyer_request = BuyerRequest.objects.select_for_update().get(id=offer.request_id)

    if buyer_request.buyer_id != user.id:
        raise UnauthorizedOfferActionError("Only the request owner can decide on offers")

    if offer.status != OfferStatus.PENDING:
        logger.warning("Refused decision on offer %s with status %s", offer.id, offer.status)
        raise OfferNotPendingError("Offer is no longer pending")

    if buyer_request.status != RequestStatus.OPEN:
        logger.warning("Refused decision on offer %s: request %s is %s", offer.id, buyer_request.id, buyer_request.status)
        raise RequestNotOpenError("Request is no longer open")

    return offer, buyer_request


@transaction.atomic
def accept_offer(*, offer_id: UUID, user: User, order_notes: str = '') -> Order:
    """
    Accept an offer and turn it into an order.

    In one transaction: the offer becomes accepted, every other pending
    offer on the request is rejected, the request is closed and exactly one
    pending order is created at the offer price. Sellers are notified after
    commit.

    Args:
        offer_id: Offer to accept
        user: Buyer who owns the request
        order_notes: Optional note for the seller, stored on the order

    Returns:
        The created Order

    Raises:
        OfferNotFoundError: If offer doesn't exist
        UnauthorizedOfferActionError: If user doesn't own the request
        OfferNotPendingError: If offer is not pending
        RequestNotOpenError: If request is not open
    """
    offer, buyer_request = _lock_offer_and_request(offer_id=offer_id, user=user)

    offer.status = OfferStatus.ACCEPTED
    offer.save(update_fields=['status', 'updated_at'])

    siblings = list(
        Offer.objects
        .select_for_update()
        .filter(request=buyer_request, status=OfferStatus.PENDING)
        .exclude(id=offer.id)
    )
    Offer.objects.filter(id__in=[o.id for o in siblings]).update(status=OfferStatus.REJECTED)

    buyer_request.status = RequestStatus.CLOSED
    buyer_request.save(update_fields=['status', 'updated_at'])

    order = OrderService.create_from_offer(offer, buyer_request, order_notes=order_notes)

    notify_on_commit(
        user_id=offer.seller_id,
        type=NotificationType.OFFER_ACCEPTED,
        title='Offer Accepted',
        message=f'Your offer for "{buyer_request.title}" has been accepted!',
        link=f'/seller/orders/{order.id}',
    )
    for sibling in siblings:
        notify_on_commit(
            user_id=sibling.seller_id,
            type=NotificationType.OFFER_REJECTED,
            title='Offer Not Selected',
            message=f'Another offer was accepted for "{buyer_request.title}"',
            link='/seller/offers',
        )

    logger.info(
        "Buyer %s accepted offer %s on request %s; %d other offer(s) rejected; order %s",
        user.id, offer.id, buyer_request.id, len(siblings), order.id,
    )
    return order


@transaction.atomic
def reject_offer(*, offer_id: UUID, user: User, reason: str = '') -> Offer:
    """
    Reject a single pending offer. The request stays open.

    Raises:
        OfferNotFoundError: If offer doesn't exist
        UnauthorizedOfferActionError: If user doesn't own the request
        OfferNotPendingError: If offer is not pending
        RequestNotOpenError: If request is not open
    """
    offer, buyer_request = _lock_offer_and_request(offer_id=offer_id, user=user)

    offer.status = OfferStatus.REJECTED
    offer.save(update_fields=['status', 'updated_at'])

    message = f'Your offer for "{buyer_request.title}" was declined'
    if reason:
        message = f'{message}: {reason}'

    notify_on_commit(
        user_id=offer.seller_id,
        type=NotificationType.OFFER_REJECTED,
        title='Offer Rejected',
        message=message,
        link='/seller/offers',
    )

    logger.info("Buyer %s rejected offer %s on request %s", user.id, offer.id, buyer_request.id)
    return offer
