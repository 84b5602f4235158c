"""Seller responses and helpful votes on reviews."""

from django.db import transaction
from django.db.models import F
from django.utils import timezone
from uuid import UUID

from apps.accounts.models import User
from apps.reviews.models import Review
from .exceptions import ReviewNotFoundError, UnauthorizedReviewActionError


@transaction.atomic
def add_seller_response(*, review_id: UUID, user: User, response: str) -> Review:
    """
    Reply publicly to a review. Replaces any earlier reply.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the product's seller
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .select_related('product')
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.product.seller_id != user.id:
        raise UnauthorizedReviewActionError("Only the seller can respond to reviews")

    review.seller_response = response
    review.seller_response_at = timezone.now()
    review.save(update_fields=['seller_response', 'seller_response_at', 'updated_at'])
    return review


def mark_review_helpful(*, review_id: UUID) -> int:
    """
    Add one helpful vote without a read-modify-write race.

    Returns:
        The new helpful count

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    updated = Review.objects.filter(id=review_id).update(helpful_count=F('helpful_count') + 1)
    if not updated:
        raise ReviewNotFoundError("Review not found")

    return Review.objects.values_list('helpful_count', flat=True).get(id=review_id)
