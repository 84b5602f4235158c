"""Services for buyer requests and seller offers."""

from .exceptions import (
    RequestsServiceError,
    RequestNotFoundError,
    OfferNotFoundError,
    NotABuyerError,
    NotASellerError,
    UnauthorizedRequestActionError,
    UnauthorizedOfferActionError,
    InvalidBudgetError,
    InvalidRequestStateError,
    RequestNotOpenError,
    OfferNotPendingError,
    InvalidOfferError,
)
from .request_management import (
    create_request,
    update_request,
    delete_request,
    get_request_by_id,
    get_open_requests,
    get_buyer_requests,
    get_requests_count,
)
from .offer_management import (
    create_offer,
    update_offer,
    withdraw_offer,
    get_offers_by_request,
    get_offers_by_seller,
    get_offer_by_seller_and_request,
)
from .offer_decisions import (
    accept_offer,
    reject_offer,
)

__all__ = [
    # Exceptions
    'RequestsServiceError',
    'RequestNotFoundError',
    'OfferNotFoundError',
    'NotABuyerError',
    'NotASellerError',
    'UnauthorizedRequestActionError',
    'UnauthorizedOfferActionError',
    'InvalidBudgetError',
    'InvalidRequestStateError',
    'RequestNotOpenError',
    'OfferNotPendingError',
    'InvalidOfferError',
    # Requests
    'create_request',
    'update_request',
    'delete_request',
    'get_request_by_id',
    'get_open_requests',
    'get_buyer_requests',
    'get_requests_count',
    # Offers
    'create_offer',
    'update_offer',
    'withdraw_offer',
    'get_offers_by_request',
    'get_offers_by_seller',
    'get_offer_by_seller_and_request',
    # Decisions
    'accept_offer',
    'reject_offer',
]
