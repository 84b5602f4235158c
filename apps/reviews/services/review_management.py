"""Review management service - CRUD operations for reviews."""

from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional
import logging

from apps.accounts.models import User
from apps.notifications.models import NotificationType
from apps.notifications.services import notify_on_commit
from apps.orders.models import Order, OrderStatus
from apps.reviews.models import Review
from .statistics import schedule_rating_refresh
from .exceptions import (
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    OrderNotFoundError,
    OrderNotReviewableError,
    UnauthorizedReviewActionError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def create_review(
    *,
    buyer: User,
    order_id: UUID,
    rating: int,
    comment: str = ''
) -> Review:
    """
    Review the product of a delivered order.

    This operation:
    1. Validates rating range
    2. Checks the order belongs to the buyer, is delivered and came from a listing
    3. Checks the order has no review yet
    4. Creates the review as a verified purchase
    5. Notifies the seller and refreshes product and seller ratings after commit

    Args:
        buyer: User writing the review (must be the order's buyer)
        order_id: Delivered order being reviewed
        rating: Overall rating (1-5)
        comment: Written review

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        OrderNotFoundError: If order doesn't exist
        UnauthorizedReviewActionError: If the user isn't the order's buyer
        OrderNotReviewableError: If order isn't delivered or has no listing
        DuplicateReviewError: If the order already has a review
    """
    if not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")

    try:
        order = Order.objects.select_related('listing').get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError("Order not found")

    if order.buyer_id != buyer.id:
        raise UnauthorizedReviewActionError("You can only review your own orders")

    if order.status != OrderStatus.DELIVERED:
        raise OrderNotReviewableError("Only delivered orders can be reviewed")

    if order.listing is None:
        raise OrderNotReviewableError("Only orders placed from a listing can be reviewed")

    if Review.objects.filter(order=order).exists():
        raise DuplicateReviewError("This order has already been reviewed")

    try:
        review = Review.objects.create(
            product=order.listing,
            buyer=buyer,
            order=order,
            rating=rating,
            comment=comment or '',
            verified_purchase=True,
        )
    except IntegrityError:
        # Database unique constraint caught duplicate
        raise DuplicateReviewError("This order has already been reviewed")

    notify_on_commit(
        user_id=order.seller_id,
        type=NotificationType.NEW_REVIEW,
        title='New Review',
        message=f'{buyer.get_display_name()} left a {rating}-star review on "{order.listing.title}"',
        link=f'/products/{order.listing_id}',
    )
    schedule_rating_refresh(product_id=order.listing_id, seller_id=order.seller_id)

    logger.info("Buyer %s reviewed order %s with %s stars", buyer.id, order.id, rating)
    return review


def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Retrieve a review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        return Review.objects.select_related(
            'buyer',
            'buyer__profile',
            'product',
        ).get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating: Optional[int] = None,
    comment: Optional[str] = None
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. Product, order and
    buyer cannot be changed.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidRatingError: If rating not in 1-5 range
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

    if review.buyer_id != user.id:
        raise UnauthorizedReviewActionError("You can only update your own reviews")

    if rating is not None and not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")

    if rating is not None:
        review.rating = rating
    if comment is not None:
        review.comment = comment

    review.save()

    schedule_rating_refresh(product_id=review.product_id, seller_id=review.product.seller_id)
    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review.

    Only the review author can delete their review.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
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

    if review.buyer_id != user.id:
        raise UnauthorizedReviewActionError("You can only delete your own reviews")

    product_id = review.product_id
    seller_id = review.product.seller_id
    review.delete()

    schedule_rating_refresh(product_id=product_id, seller_id=seller_id)


def get_reviews_by_product(*, product_id: UUID) -> QuerySet[Review]:
    """Reviews of a product with their buyers, newest first."""
    return (
        Review.objects
        .filter(product_id=product_id)
        .select_related('buyer', 'buyer__profile')
        .order_by('-created_at')
    )


def get_reviews_by_buyer(*, buyer: User) -> QuerySet[Review]:
    """Reviews written by a buyer with their products, newest first."""
    return (
        Review.objects
        .filter(buyer=buyer)
        .select_related('product')
        .order_by('-created_at')
    )


def get_review_by_order(*, order_id: UUID) -> Optional[Review]:
    return Review.objects.filter(order_id=order_id).first()


def get_seller_reviews(*, seller_id: UUID) -> QuerySet[Review]:
    """Reviews of every product a seller listed, newest first."""
    return (
        Review.objects
        .filter(product__seller_id=seller_id)
        .select_related('buyer', 'buyer__profile', 'product')
        .order_by('-created_at')
    )
