"""
Custom permission classes for orders app.

Object-level checks for order access; status rules themselves live in
OrderService.
"""
from rest_framework.permissions import BasePermission

from .models import OrderStatus


class IsOrderParticipant(BasePermission):
    """
    Permission to view an order.

    Allows access if the user is the order's buyer or seller.
    """

    message = 'You can only view your own orders.'

    def has_object_permission(self, request, view, obj):
        return obj.is_participant(request.user)


class CanUpdateOrderStatus(BasePermission):
    """
    Permission to change an order's status.

    Allows if:
    - User is the seller (advances the order or cancels it)
    - User is the buyer and the requested status is ``cancelled``
    """

    message = 'You do not have permission to change this order.'

    def has_object_permission(self, request, view, obj):
        if request.user.id == obj.seller_id:
            return True

        if request.user.id == obj.buyer_id:
            if not isinstance(request.data, dict):
                return False
            return request.data.get('status') == OrderStatus.CANCELLED

        return False
