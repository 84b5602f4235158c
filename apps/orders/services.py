"""
Order Services Module
=====================

Business logic for orders: creation from accepted offers and from listing
checkout, the status sequence, and participant-scoped lookups.

Classes:
    OrderService: Creates orders and moves them through their status sequence.

Example:
    Advancing an order as its seller::

        from apps.orders.services import OrderService
        from apps.orders.models import OrderStatus

        order = OrderService.update_order_status(
            order_id=order.id,
            user=seller,
            new_status=OrderStatus.SHIPPED,
        )
"""

from django.db import transaction
from django.db.models import F
import logging

from apps.listings.models import Product, ListingStatus
from apps.notifications.models import NotificationType
from apps.notifications.services import notify_on_commit
from apps.requests.models import BuyerRequest, RequestStatus
from .models import Order, OrderStatus
from .exceptions import (
    OrderNotFoundError,
    InvalidStatusTransitionError,
    InsufficientPermissionsError,
    ListingUnavailableError,
    InsufficientInventoryError,
    OwnListingPurchaseError,
)

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for creating orders and changing their status.

    Status sequence::

        pending -> accepted -> shipped -> delivered
        pending/accepted -> cancelled

    The seller advances the sequence. Either participant may cancel while
    the order is pending or accepted.

    Methods:
        create_from_offer: Create the order for an accepted offer.
        create_order_from_listing: Checkout of a listing by a buyer.
        get_buyer_orders: Orders placed by a user.
        get_seller_orders: Orders received by a user.
        get_order_by_id: Single order, participants only.
        update_order_status: Move an order to its next status.
        get_order_total: agreed_price multiplied by quantity.
    """

    @staticmethod
    def create_from_offer(offer, buyer_request, order_notes=''):
        """
        Create the order for an offer the buyer accepted.

        Must be called inside the transaction that accepts the offer.

        Args:
            offer (Offer): The accepted offer.
            buyer_request (BuyerRequest): The request the offer answers.
            order_notes (str, optional): Buyer's note for the seller.

        Returns:
            Order: The created order in ``pending`` status.
        """
        return Order.objects.create(
            buyer_id=buyer_request.buyer_id,
            seller_id=offer.seller_id,
            request=buyer_request,
            offer=offer,
            title=buyer_request.title,
            description=buyer_request.description,
            quantity=buyer_request.quantity or 1,
            agreed_price=offer.price,
            delivery_location=buyer_request.delivery_location,
            order_notes=order_notes or '',
            status=OrderStatus.PENDING,
        )

    @staticmethod
    def create_order_from_listing(
        buyer,
        listing_id,
        quantity=1,
        delivery_location='',
        delivery_phone='',
        delivery_notes='',
        order_notes='',
        payment_method=''
    ):
        """
        Buy units of an active listing at its current price.

        The listing row is locked while its inventory is decremented. A
        listing whose inventory reaches zero is marked ``sold``.

        Args:
            buyer (User): The purchasing user.
            listing_id (UUID): Listing being bought.
            quantity (int, optional): Units to buy. Defaults to 1.
            delivery_location (str, optional): Where to deliver.
            delivery_phone (str, optional): Contact phone for delivery.
            delivery_notes (str, optional): Instructions for the courier.
            order_notes (str, optional): Note for the seller.
            payment_method (str, optional): PaymentMethod value.

        Returns:
            Order: The created order in ``pending`` status.

        Raises:
            ListingUnavailableError: If the listing is missing or not active.
            OwnListingPurchaseError: If the buyer is the listing's seller.
            InsufficientInventoryError: If quantity exceeds inventory.
        """
        with transaction.atomic():
            try:
                listing = Product.objects.select_for_update().get(id=listing_id)
            except Product.DoesNotExist:
                raise ListingUnavailableError()

            if listing.status != ListingStatus.ACTIVE:
                raise ListingUnavailableError()

            if listing.seller_id == buyer.id:
                raise OwnListingPurchaseError()

            if quantity > listing.inventory_quantity:
                raise InsufficientInventoryError(
                    f'Only {listing.inventory_quantity} item(s) left in stock.'
                )

            order = Order.objects.create(
                buyer=buyer,
                seller_id=listing.seller_id,
                listing=listing,
                title=listing.title,
                description=listing.description,
                quantity=quantity,
                agreed_price=listing.price,
                delivery_location=delivery_location or '',
                delivery_phone=delivery_phone or '',
                delivery_notes=delivery_notes or '',
                order_notes=order_notes or '',
                payment_method=payment_method or '',
                status=OrderStatus.PENDING,
            )

            listing.inventory_quantity -= quantity
            update_fields = ['inventory_quantity', 'updated_at']
            if listing.inventory_quantity == 0:
                listing.status = ListingStatus.SOLD
                update_fields.append('status')
            listing.save(update_fields=update_fields)

            notify_on_commit(
                user_id=listing.seller_id,
                type=NotificationType.NEW_ORDER,
                title='New Order',
                message=f'You have a new order for "{listing.title}"',
                link=f'/seller/orders/{order.id}',
            )

            logger.info(
                "Buyer %s ordered %s x listing %s (order %s)",
                buyer.id, quantity, listing.id, order.id,
            )
            return order

    @staticmethod
    def get_buyer_orders(buyer, status=None):
        """Orders placed by ``buyer``, newest first."""
        queryset = Order.objects.filter(buyer=buyer).select_related('seller', 'seller__profile')
        if status:
            queryset = queryset.filter(status=status)
        return queryset.order_by('-created_at')

    @staticmethod
    def get_seller_orders(seller, status=None):
        """Orders received by ``seller``, newest first."""
        queryset = Order.objects.filter(seller=seller).select_related('buyer', 'buyer__profile')
        if status:
            queryset = queryset.filter(status=status)
        return queryset.order_by('-created_at')

    @staticmethod
    def get_order_by_id(order_id, user):
        """
        Get an order the user takes part in.

        Raises:
            OrderNotFoundError: If the order doesn't exist.
            InsufficientPermissionsError: If user is neither buyer nor seller.
        """
        try:
            order = Order.objects.select_related(
                'buyer', 'buyer__profile', 'seller', 'seller__profile',
            ).get(id=order_id)
        except Order.DoesNotExist:
            raise OrderNotFoundError()

        if not order.is_participant(user):
            raise InsufficientPermissionsError('You can only view your own orders.')

        return order

    @staticmethod
    def update_order_status(order_id, user, new_status):
        """
        Move an order to ``new_status``.

        The seller advances pending -> accepted -> shipped -> delivered.
        Buyer or seller may cancel a pending or accepted order. Cancelling
        a listing order puts the units back in stock. Delivering a request
        order completes the request.

        The other participant is notified after commit.

        Args:
            order_id (UUID): The order to change.
            user (User): Participant making the change.
            new_status (str): Target OrderStatus value.

        Returns:
            Order: The updated order.

        Raises:
            OrderNotFoundError: If the order doesn't exist.
            InsufficientPermissionsError: If user may not make this change.
            InvalidStatusTransitionError: If new_status is not a legal next step.
        """
        with transaction.atomic():
            try:
                order = Order.objects.select_for_update().get(id=order_id)
            except Order.DoesNotExist:
                raise OrderNotFoundError()

            if not order.is_participant(user):
                raise InsufficientPermissionsError('You can only update your own orders.')

            old_status = order.status

            if old_status == new_status:
                raise InvalidStatusTransitionError(f'Order is already {old_status}.')

            if not order.can_transition_to(new_status):
                logger.warning(
                    "Refused order %s transition %s -> %s by user %s",
                    order.id, old_status, new_status, user.id,
                )
                raise InvalidStatusTransitionError(
                    f'Cannot change order from {old_status} to {new_status}.'
                )

            if new_status != OrderStatus.CANCELLED and user.id != order.seller_id:
                raise InsufficientPermissionsError('Only the seller can advance the order.')

            order.status = new_status
            order.save(update_fields=['status', 'updated_at'])

            if new_status == OrderStatus.CANCELLED and order.listing_id:
                OrderService._restock_listing(order)

            if new_status == OrderStatus.DELIVERED and order.request_id:
                BuyerRequest.objects.filter(id=order.request_id).update(
                    status=RequestStatus.COMPLETED
                )

            OrderService._notify_status_change(order, user)

            logger.info(
                "Order %s moved %s -> %s by user %s",
                order.id, old_status, new_status, user.id,
            )
            return order

    @staticmethod
    def get_order_total(order):
        """Amount the buyer pays: agreed unit price times quantity."""
        return order.agreed_price * order.quantity

    @staticmethod
    def _restock_listing(order):
        listing = Product.objects.select_for_update().filter(id=order.listing_id).first()
        if listing is None:
            return
        listing.inventory_quantity = F('inventory_quantity') + order.quantity
        update_fields = ['inventory_quantity', 'updated_at']
        if listing.status == ListingStatus.SOLD:
            listing.status = ListingStatus.ACTIVE
            update_fields.append('status')
        listing.save(update_fields=update_fields)

    @staticmethod
    def _status_message(order):
        if order.status == OrderStatus.SHIPPED:
            return f'Great news! Your order "{order.title}" has been shipped.'
        if order.status == OrderStatus.DELIVERED:
            return f'Your order "{order.title}" has been delivered!'
        return f'Your order for "{order.title}" has been updated to {order.status}'

    @staticmethod
    def _notify_status_change(order, changed_by):
        if changed_by.id == order.buyer_id:
            # Only cancellation is open to the buyer.
            notify_on_commit(
                user_id=order.seller_id,
                type=NotificationType.ORDER_STATUS_UPDATED,
                title='Order Cancelled',
                message=f'The buyer cancelled the order "{order.title}"',
                link=f'/seller/orders/{order.id}',
            )
            return

        notify_on_commit(
            user_id=order.buyer_id,
            type=NotificationType.ORDER_STATUS_UPDATED,
            title='Order Update',
            message=OrderService._status_message(order),
            link=f'/buyer/orders/{order.id}',
        )
