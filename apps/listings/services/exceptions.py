"""Domain-specific exceptions for listings services."""


class ListingsServiceError(Exception):
    """Base exception for listings services."""
    pass


class ListingNotFoundError(ListingsServiceError):
    """Raised when listing does not exist."""
    pass


class NotASellerError(ListingsServiceError):
    """Raised when a buyer-only account tries to publish a listing."""
    pass


class UnauthorizedListingActionError(ListingsServiceError):
    """Raised when a user modifies a listing they do not own."""
    pass


class QuestionNotFoundError(ListingsServiceError):
    """Raised when question does not exist."""
    pass


class UnauthorizedQuestionActionError(ListingsServiceError):
    """Raised when a user answers or deletes a question they may not touch."""
    pass


class InvalidQuestionError(ListingsServiceError):
    """Raised when question content or threading is invalid."""
    pass
