"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist or is inaccessible."""
    pass


class DuplicateReviewError(ReviewsServiceError):
    """The order already has a review."""
    pass


class InvalidRatingError(ReviewsServiceError):
    """Rating must be between 1 and 5."""
    pass


class OrderNotFoundError(ReviewsServiceError):
    """Order being reviewed does not exist."""
    pass


class OrderNotReviewableError(ReviewsServiceError):
    """Order is not delivered or did not come from a listing."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError):
    """User cannot modify this review."""
    pass
