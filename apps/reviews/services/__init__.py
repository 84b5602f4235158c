"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations
- Seller responses and helpful votes
- Rating statistics and aggregate maintenance
"""

from .review_management import (
    create_review,
    get_review_by_id,
    update_review,
    delete_review,
    get_reviews_by_product,
    get_reviews_by_buyer,
    get_review_by_order,
    get_seller_reviews,
)

from .feedback import (
    add_seller_response,
    mark_review_helpful,
)

from .statistics import (
    get_product_rating_breakdown,
    refresh_ratings,
    schedule_rating_refresh,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    OrderNotFoundError,
    OrderNotReviewableError,
    UnauthorizedReviewActionError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'update_review',
    'delete_review',
    'get_reviews_by_product',
    'get_reviews_by_buyer',
    'get_review_by_order',
    'get_seller_reviews',
    # Feedback Services
    'add_seller_response',
    'mark_review_helpful',
    # Statistics Services
    'get_product_rating_breakdown',
    'refresh_ratings',
    'schedule_rating_refresh',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'DuplicateReviewError',
    'InvalidRatingError',
    'OrderNotFoundError',
    'OrderNotReviewableError',
    'UnauthorizedReviewActionError',
]
