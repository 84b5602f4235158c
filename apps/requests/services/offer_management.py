"""Seller offers on buyer requests."""

from django.db import transaction
from django.db.models import QuerySet
from decimal import Decimal
from uuid import UUID
from typing import Optional, Dict, Any, Tuple
import logging

from apps.accounts.models import User
from apps.messaging.services import get_or_create_conversation
from apps.notifications.models import NotificationType
from apps.notifications.services import notify_on_commit
from ..models import BuyerRequest, Offer, OfferStatus
from .exceptions import (
    RequestNotFoundError,
    OfferNotFoundError,
    NotASellerError,
    UnauthorizedOfferActionError,
    RequestNotOpenError,
    OfferNotPendingError,
    InvalidOfferError,
)

logger = logging.getLogger(__name__)


def _ensure_seller(user: User) -> None:
    profile = getattr(user, 'profile', None)
    if profile is None or not profile.is_seller:
        raise NotASellerError("Only sellers can make offers")


@transaction.atomic
def create_offer(
    *,
    seller: User,
    request_id: UUID,
    price: Decimal,
    description: str,
    delivery_timeline: str,
    delivery_cost: Decimal = Decimal('0.00'),
    payment_terms: str = '',
    attachments: Optional[list[str]] = None
) -> Tuple[Offer, bool]:
    """
    Make an offer on an open request, or revise one's pending offer.

    A conversation between seller and buyer about the request is opened
    if none exists, and the buyer is notified.

    Returns:
        Tuple of (offer, created). created is False when an existing
        pending offer was revised.

    Raises:
        NotASellerError: If the user cannot sell
        RequestNotFoundError: If request doesn't exist
        InvalidOfferError: On own request, or when a non-pending offer exists
        RequestNotOpenError: If the request is not open or its buyer left
    """
    _ensure_seller(seller)

    try:
        buyer_request = BuyerRequest.objects.select_for_update().get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")

    if buyer_request.buyer_id == seller.id:
        raise InvalidOfferError("You cannot make an offer on your own request")

    if not buyer_request.is_open or not buyer_request.buyer.is_active:
        raise RequestNotOpenError("Request is no longer open")

    fields = {
        'price': price,
        'description': description,
        'delivery_timeline': delivery_timeline,
        'delivery_cost': delivery_cost or Decimal('0.00'),
        'payment_terms': payment_terms or '',
        'attachments': attachments or [],
    }

    offer = (
        Offer.objects
        .select_for_update()
        .filter(seller=seller, request=buyer_request)
        .first()
    )

    if offer is not None:
        if not offer.is_pending:
            raise InvalidOfferError("You have already made an offer on this request")
        for field, value in fields.items():
            setattr(offer, field, value)
        offer.save()
        created = False
    else:
        offer = Offer.objects.create(
            seller=seller,
            request=buyer_request,
            status=OfferStatus.PENDING,
            **fields
        )
        created = True

    get_or_create_conversation(
        user=seller,
        other_user_id=buyer_request.buyer_id,
        request_id=buyer_request.id,
    )

    notify_on_commit(
        user_id=buyer_request.buyer_id,
        type=NotificationType.NEW_OFFER,
        title='New Offer Received',
        message=f'You have a new offer for "{buyer_request.title}"',
        link=f'/buyer/requests/{buyer_request.id}',
    )

    logger.info(
        "Seller %s %s offer %s on request %s",
        seller.id, 'made' if created else 'revised', offer.id, buyer_request.id,
    )
    return offer, created


def _get_own_pending_offer(*, offer_id: UUID, user: User) -> Offer:
    try:
        offer = Offer.objects.select_for_update().get(id=offer_id)
    except Offer.DoesNotExist:
        raise OfferNotFoundError("Offer not found")

    if offer.seller_id != user.id:
        raise UnauthorizedOfferActionError("You can only change your own offers")

    if not offer.is_pending:
        raise OfferNotPendingError("Offer is no longer pending")

    return offer


@transaction.atomic
def update_offer(*, offer_id: UUID, user: User, data: Dict[str, Any]) -> Offer:
    """
    Revise a pending offer (owner only).

    Raises:
        OfferNotFoundError: If offer doesn't exist
        UnauthorizedOfferActionError: If user is not the offer's seller
        OfferNotPendingError: If the offer was already decided or withdrawn
    """
    offer = _get_own_pending_offer(offer_id=offer_id, user=user)

    allowed_fields = [
        'price', 'description', 'delivery_timeline', 'delivery_cost',
        'payment_terms', 'attachments',
    ]

    for field, value in data.items():
        if field in allowed_fields:
            setattr(offer, field, value)

    offer.save()
    return offer


@transaction.atomic
def withdraw_offer(*, offer_id: UUID, user: User) -> Offer:
    """
    Withdraw a pending offer (owner only).

    Raises:
        OfferNotFoundError: If offer doesn't exist
        UnauthorizedOfferActionError: If user is not the offer's seller
        OfferNotPendingError: If the offer was already decided or withdrawn
    """
    offer = _get_own_pending_offer(offer_id=offer_id, user=user)
    offer.status = OfferStatus.WITHDRAWN
    offer.save(update_fields=['status', 'updated_at'])

    logger.info("Seller %s withdrew offer %s", user.id, offer.id)
    return offer


def get_offers_by_request(*, request_id: UUID) -> QuerySet[Offer]:
    """Offers on a request, newest first."""
    return (
        Offer.objects
        .filter(request_id=request_id)
        .select_related('seller', 'seller__profile')
        .order_by('-created_at')
    )


def get_offers_by_seller(*, seller: User, status: Optional[str] = None) -> QuerySet[Offer]:
    """A seller's offers with their requests, newest first."""
    queryset = Offer.objects.filter(seller=seller).select_related('request')
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-created_at')


def get_offer_by_seller_and_request(*, seller: User, request_id: UUID) -> Optional[Offer]:
    """The seller's offer on a request, or None."""
    return Offer.objects.filter(seller=seller, request_id=request_id).first()
