"""
Domain exceptions for orders app.

Order errors are raised as DRF ``APIException`` subclasses so views can let
them propagate; the status code travels with the exception.
"""
from rest_framework.exceptions import APIException


class OrderNotFoundError(APIException):
    """Order not found."""
    status_code = 404
    default_detail = 'Order not found.'
    default_code = 'order_not_found'


class InvalidStatusTransitionError(APIException):
    """Requested status is not a legal next step for the order."""
    status_code = 400
    default_detail = 'Invalid status transition for order.'
    default_code = 'invalid_status_transition'


class InsufficientPermissionsError(APIException):
    """User doesn't have permission for operation."""
    status_code = 403
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'insufficient_permissions'


class ListingUnavailableError(APIException):
    """Listing is inactive, sold or missing."""
    status_code = 400
    default_detail = 'This listing is not available for purchase.'
    default_code = 'listing_unavailable'


class InsufficientInventoryError(APIException):
    """Requested quantity exceeds the listing's inventory."""
    status_code = 400
    default_detail = 'Not enough items in stock.'
    default_code = 'insufficient_inventory'


class OwnListingPurchaseError(APIException):
    """Seller tried to buy their own listing."""
    status_code = 400
    default_detail = 'You cannot buy your own listing.'
    default_code = 'own_listing_purchase'
