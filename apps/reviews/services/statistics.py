"""Statistics service - rating aggregates."""

from django.db import transaction
from django.db.models import Count
from uuid import UUID

from apps.accounts.models import Profile
from apps.listings.models import Product
from apps.reviews.models import Review


def get_product_rating_breakdown(*, product_id: UUID) -> dict:
    """
    Count of reviews per star rating for a product.

    Returns:
        Dictionary {1: n, 2: n, 3: n, 4: n, 5: n}, zero-filled

    Example:
        >>> get_product_rating_breakdown(product_id=product.id)
        {1: 0, 2: 1, 3: 0, 4: 3, 5: 8}
    """
    breakdown = {star: 0 for star in range(1, 6)}

    rows = (
        Review.objects
        .filter(product_id=product_id)
        .values('rating')
        .annotate(count=Count('id'))
    )
    for row in rows:
        breakdown[row['rating']] = row['count']

    return breakdown


def refresh_ratings(*, product_id: UUID, seller_id: UUID) -> None:
    """Recompute the product's and the seller's aggregate ratings."""
    product = Product.objects.filter(id=product_id).first()
    if product is not None:
        product.update_aggregate_rating()

    profile = Profile.objects.filter(user_id=seller_id).first()
    if profile is not None:
        profile.update_aggregate_rating()


def schedule_rating_refresh(*, product_id: UUID, seller_id: UUID) -> None:
    """Refresh aggregate ratings once the surrounding transaction commits."""
    transaction.on_commit(
        lambda: refresh_ratings(product_id=product_id, seller_id=seller_id)
    )
