"""Buyer request CRUD operations service."""

from django.db import transaction
from django.db.models import Count, Q, QuerySet
from datetime import date
from decimal import Decimal
from uuid import UUID
from typing import Optional, Dict, Any
import logging

from apps.accounts.models import User
from ..models import BuyerRequest, RequestStatus, OfferStatus
from .exceptions import (
    RequestNotFoundError,
    NotABuyerError,
    UnauthorizedRequestActionError,
    InvalidBudgetError,
    InvalidRequestStateError,
)

logger = logging.getLogger(__name__)


def _ensure_buyer(user: User) -> None:
    profile = getattr(user, 'profile', None)
    if profile is None or not profile.is_buyer:
        raise NotABuyerError("Only buyers can post requests")


def _validate_budget(budget_min: Optional[Decimal], budget_max: Optional[Decimal]) -> None:
    if budget_min is not None and budget_max is not None and budget_max < budget_min:
        raise InvalidBudgetError("Maximum budget must be greater than or equal to minimum budget")


def _with_offer_count(queryset: QuerySet[BuyerRequest]) -> QuerySet[BuyerRequest]:
    return queryset.annotate(
        offer_count=Count('offers', filter=~Q(offers__status=OfferStatus.WITHDRAWN))
    )


@transaction.atomic
def create_request(
    *,
    buyer: User,
    title: str,
    description: str,
    category: str,
    budget_min: Optional[Decimal] = None,
    budget_max: Optional[Decimal] = None,
    quantity: int = 1,
    deadline: Optional[date] = None,
    delivery_location: str = ''
) -> BuyerRequest:
    """
    Post a new buyer request. New requests are always open.

    Raises:
        NotABuyerError: If the user cannot buy
        InvalidBudgetError: If budget_max < budget_min
    """
    _ensure_buyer(buyer)
    _validate_budget(budget_min, budget_max)

    buyer_request = BuyerRequest.objects.create(
        buyer=buyer,
        title=title,
        description=description,
        category=category,
        budget_min=budget_min,
        budget_max=budget_max,
        quantity=quantity,
        deadline=deadline,
        delivery_location=delivery_location or '',
        status=RequestStatus.OPEN,
    )

    logger.info("Buyer %s posted request %s", buyer.id, buyer_request.id)
    return buyer_request


@transaction.atomic
def update_request(
    *,
    request_id: UUID,
    user: User,
    data: Dict[str, Any]
) -> BuyerRequest:
    """
    Update a request (owner only).

    Raises:
        RequestNotFoundError: If request doesn't exist
        UnauthorizedRequestActionError: If user is not the buyer
        InvalidBudgetError: If the resulting budget range is inverted
        InvalidRequestStateError: If reopening a request whose offer was accepted
    """
    try:
        buyer_request = BuyerRequest.objects.select_for_update().get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")

    if buyer_request.buyer_id != user.id:
        raise UnauthorizedRequestActionError("You can only update your own requests")

    allowed_fields = [
        'title', 'description', 'category', 'budget_min', 'budget_max',
        'quantity', 'deadline', 'delivery_location', 'status',
    ]

    for field, value in data.items():
        if field in allowed_fields:
            setattr(buyer_request, field, value)

    _validate_budget(buyer_request.budget_min, buyer_request.budget_max)

    if (
        buyer_request.status == RequestStatus.OPEN
        and buyer_request.offers.filter(status=OfferStatus.ACCEPTED).exists()
    ):
        raise InvalidRequestStateError("A request with an accepted offer cannot be reopened")

    buyer_request.save()
    return buyer_request


@transaction.atomic
def delete_request(*, request_id: UUID, user: User) -> None:
    """
    Delete a request and its offers (owner only).

    Raises:
        RequestNotFoundError: If request doesn't exist
        UnauthorizedRequestActionError: If user is not the buyer
    """
    try:
        buyer_request = BuyerRequest.objects.select_for_update().get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")

    if buyer_request.buyer_id != user.id:
        raise UnauthorizedRequestActionError("You can only delete your own requests")

    buyer_request.delete()
    logger.info("Buyer %s deleted request %s", user.id, request_id)


def get_request_by_id(*, request_id: UUID) -> BuyerRequest:
    """
    Get request by ID.

    Raises:
        RequestNotFoundError: If request doesn't exist
    """
    try:
        return _with_offer_count(
            BuyerRequest.objects.select_related('buyer', 'buyer__profile')
        ).get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")


def get_open_requests(
    *,
    category: Optional[str] = None,
    search: Optional[str] = None,
    exclude_buyer: Optional[User] = None,
    limit: Optional[int] = None
) -> QuerySet[BuyerRequest]:
    """
    Open requests sellers can make offers on, newest first.

    Args:
        category: Exact category
        search: Case-insensitive term matched in title and description
        exclude_buyer: Leave out this user's own requests
        limit: Cap on the number of results
    """
    queryset = _with_offer_count(
        BuyerRequest.objects
        .filter(status=RequestStatus.OPEN)
        .select_related('buyer', 'buyer__profile')
    )

    if category:
        queryset = queryset.filter(category=category)

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(description__icontains=search)
        )

    if exclude_buyer is not None:
        queryset = queryset.exclude(buyer=exclude_buyer)

    queryset = queryset.order_by('-created_at')

    if limit:
        queryset = queryset[:limit]

    return queryset


def get_buyer_requests(*, buyer: User, status: Optional[str] = None) -> QuerySet[BuyerRequest]:
    """All requests of a buyer, newest first."""
    queryset = _with_offer_count(BuyerRequest.objects.filter(buyer=buyer))
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-created_at')


def get_requests_count(*, status: Optional[str] = None) -> int:
    queryset = BuyerRequest.objects.all()
    if status:
        queryset = queryset.filter(status=status)
    return queryset.count()
