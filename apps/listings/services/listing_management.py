"""Listing CRUD operations service."""

from django.db import transaction
from django.db.models import F
from django.contrib.auth import get_user_model
from decimal import Decimal
from uuid import UUID
from typing import Optional, Dict, Any
import logging

from apps.reviews.services.statistics import schedule_rating_refresh
from ..models import Product, ListingStatus
from .exceptions import (
    ListingNotFoundError,
    NotASellerError,
    UnauthorizedListingActionError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def _ensure_seller(user: User) -> None:
    profile = getattr(user, 'profile', None)
    if profile is None or not profile.is_seller:
        raise NotASellerError("Only sellers can publish listings")


@transaction.atomic
def create_listing(
    *,
    seller: User,
    title: str,
    description: str,
    category: str,
    price: Decimal,
    inventory_quantity: int = 0,
    image_url: str = '',
    images: Optional[list[str]] = None,
    specifications: Optional[Dict[str, Any]] = None,
    status: str = ListingStatus.ACTIVE
) -> Product:
    """
    Publish a new listing.

    Args:
        seller: User publishing the listing (must have a seller profile)
        title: Listing title
        description: Listing description
        category: One of Category values
        price: Unit price
        inventory_quantity: Units in stock
        image_url: Main image
        images: Additional image URLs
        specifications: Free-form key/value attributes
        status: Initial status

    Returns:
        Created Product instance

    Raises:
        NotASellerError: If the user is not a seller
    """
    _ensure_seller(seller)

    listing = Product.objects.create(
        seller=seller,
        title=title,
        description=description,
        category=category,
        price=price,
        inventory_quantity=inventory_quantity,
        image_url=image_url or '',
        images=images or [],
        specifications=specifications or {},
        status=status,
    )

    logger.info("Seller %s created listing %s", seller.id, listing.id)
    return listing


@transaction.atomic
def update_listing(
    *,
    listing_id: UUID,
    user: User,
    data: Dict[str, Any]
) -> Product:
    """
    Update a listing.

    Raises:
        ListingNotFoundError: If listing doesn't exist
        UnauthorizedListingActionError: If user is not the seller
    """
    try:
        listing = (
            Product.objects
            .select_for_update()
            .get(id=listing_id)
        )
    except Product.DoesNotExist:
        raise ListingNotFoundError(f"Listing {listing_id} not found")

    if listing.seller_id != user.id:
        raise UnauthorizedListingActionError("You can only update your own listings")

    allowed_fields = [
        'title', 'description', 'category', 'price', 'status',
        'image_url', 'images', 'inventory_quantity', 'specifications',
    ]

    for field, value in data.items():
        if field in allowed_fields:
            setattr(listing, field, value)

    listing.save()
    return listing


@transaction.atomic
def delete_listing(*, listing_id: UUID, user: User) -> None:
    """
    Delete a listing.

    Orders keep their own copy of title and price, so they survive. The
    listing's reviews go with it and the seller's rating is recomputed
    once the deletion commits.

    Raises:
        ListingNotFoundError: If listing doesn't exist
        UnauthorizedListingActionError: If user is not the seller
    """
    try:
        listing = (
            Product.objects
            .select_for_update()
            .get(id=listing_id)
        )
    except Product.DoesNotExist:
        raise ListingNotFoundError(f"Listing {listing_id} not found")

    if listing.seller_id != user.id:
        raise UnauthorizedListingActionError("You can only delete your own listings")

    listing.delete()
    schedule_rating_refresh(product_id=listing_id, seller_id=user.id)
    logger.info("Seller %s deleted listing %s", user.id, listing_id)


def get_listing_by_id(*, listing_id: UUID) -> Product:
    """
    Get listing by ID.

    Raises:
        ListingNotFoundError: If listing doesn't exist
    """
    try:
        return Product.objects.select_related('seller', 'seller__profile').get(id=listing_id)
    except Product.DoesNotExist:
        raise ListingNotFoundError(f"Listing {listing_id} not found")


def record_listing_view(*, listing_id: UUID) -> None:
    """Increment the view counter without a read-modify-write race."""
    Product.objects.filter(id=listing_id).update(views=F('views') + 1)


def get_listings_count(*, status: Optional[str] = None) -> int:
    queryset = Product.objects.all()
    if status:
        queryset = queryset.filter(status=status)
    return queryset.count()
