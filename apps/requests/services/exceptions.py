"""Domain exceptions for requests and offers."""


class RequestsServiceError(Exception):
    """Base exception for request/offer service errors."""
    pass


class RequestNotFoundError(RequestsServiceError):
    pass


class OfferNotFoundError(RequestsServiceError):
    pass


class NotABuyerError(RequestsServiceError):
    """User's profile does not allow buying."""
    pass


class NotASellerError(RequestsServiceError):
    """User's profile does not allow selling."""
    pass


class UnauthorizedRequestActionError(RequestsServiceError):
    """User is not the buyer who owns the request."""
    pass


class UnauthorizedOfferActionError(RequestsServiceError):
    """User is not allowed to act on the offer."""
    pass


class InvalidBudgetError(RequestsServiceError):
    pass


class InvalidRequestStateError(RequestsServiceError):
    pass


class RequestNotOpenError(RequestsServiceError):
    pass


class OfferNotPendingError(RequestsServiceError):
    pass


class InvalidOfferError(RequestsServiceError):
    pass
