import pytest
import uuid
from decimal import Decimal
from apps.listings.models import Product, ListingStatus
from apps.notifications.models import Notification, NotificationType
from apps.orders.exceptions import (
    OrderNotFoundError,
    InvalidStatusTransitionError,
    InsufficientPermissionsError,
    ListingUnavailableError,
    InsufficientInventoryError,
    OwnListingPurchaseError,
)
from apps.orders.models import OrderStatus, PaymentMethod
from apps.orders.services import OrderService
from apps.requests.models import BuyerRequest, RequestStatus


# =============================================================================
# Checkout
# =============================================================================

@pytest.mark.django_db
class TestCreateOrderFromListing:

    def test_checkout_decrements_inventory(self, order_buyer, listing):
        order = OrderService.create_order_from_listing(
            buyer=order_buyer,
            listing_id=listing.id,
            quantity=2,
            delivery_location='Sarbet',
            delivery_phone='+251900000000',
            payment_method=PaymentMethod.MOBILE_MONEY,
        )

        listing.refresh_from_db()
        assert order.status == OrderStatus.PENDING
        assert order.agreed_price == Decimal('2500.00')
        assert order.total == Decimal('5000.00')
        assert listing.inventory_quantity == 1
        assert listing.status == ListingStatus.ACTIVE

    def test_last_units_mark_listing_sold(self, order_buyer, listing):
        OrderService.create_order_from_listing(buyer=order_buyer, listing_id=listing.id, quantity=3)

        listing.refresh_from_db()
        assert listing.inventory_quantity == 0
        assert listing.status == ListingStatus.SOLD

    def test_notifies_seller(self, order_buyer, order_seller, listing, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            OrderService.create_order_from_listing(buyer=order_buyer, listing_id=listing.id)

        notification = Notification.objects.get(user=order_seller)
        assert notification.type == NotificationType.NEW_ORDER
        assert notification.message == 'You have a new order for "Whiteboard 120x90"'

    def test_more_than_in_stock(self, order_buyer, listing):
        with pytest.raises(InsufficientInventoryError) as exc_info:
            OrderService.create_order_from_listing(buyer=order_buyer, listing_id=listing.id, quantity=4)

        assert 'Only 3 item(s) left in stock.' in str(exc_info.value)

    def test_inactive_listing(self, order_buyer, listing):
        Product.objects.filter(id=listing.id).update(status=ListingStatus.INACTIVE)

        with pytest.raises(ListingUnavailableError):
            OrderService.create_order_from_listing(buyer=order_buyer, listing_id=listing.id)

    def test_missing_listing(self, order_buyer):
        with pytest.raises(ListingUnavailableError):
            OrderService.create_order_from_listing(buyer=order_buyer, listing_id=uuid.uuid4())

    def test_own_listing(self, order_seller, listing):
        with pytest.raises(OwnListingPurchaseError):
            OrderService.create_order_from_listing(buyer=order_seller, listing_id=listing.id)


# =============================================================================
# Status sequence
# =============================================================================

@pytest.mark.django_db
class TestUpdateOrderStatus:

    def test_seller_advances_in_sequence(self, order_seller, listing_order):
        for next_status in (OrderStatus.ACCEPTED, OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            order = OrderService.update_order_status(listing_order.id, order_seller, next_status)
            assert order.status == next_status

    def test_cannot_skip_steps(self, order_seller, listing_order):
        with pytest.raises(InvalidStatusTransitionError):
            OrderService.update_order_status(listing_order.id, order_seller, OrderStatus.DELIVERED)

    def test_same_status_refused(self, order_seller, listing_order):
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            OrderService.update_order_status(listing_order.id, order_seller, OrderStatus.PENDING)

        assert 'already pending' in str(exc_info.value)

    def test_buyer_cannot_advance(self, order_buyer, listing_order):
        with pytest.raises(InsufficientPermissionsError):
            OrderService.update_order_status(listing_order.id, order_buyer, OrderStatus.ACCEPTED)

    def test_outsider_refused(self, order_outsider, listing_order):
        with pytest.raises(InsufficientPermissionsError):
            OrderService.update_order_status(listing_order.id, order_outsider, OrderStatus.CANCELLED)

    def test_missing_order(self, order_seller):
        with pytest.raises(OrderNotFoundError):
            OrderService.update_order_status(uuid.uuid4(), order_seller, OrderStatus.ACCEPTED)

    def test_buyer_cancel_restocks_and_notifies_seller(
        self, order_buyer, order_seller, listing, listing_order, django_capture_on_commit_callbacks
    ):
        Product.objects.filter(id=listing.id).update(inventory_quantity=0, status=ListingStatus.SOLD)

        with django_capture_on_commit_callbacks(execute=True):
            OrderService.update_order_status(listing_order.id, order_buyer, OrderStatus.CANCELLED)

        listing.refresh_from_db()
        assert listing.inventory_quantity == 2
        assert listing.status == ListingStatus.ACTIVE

        notification = Notification.objects.get(user=order_seller)
        assert notification.title == 'Order Cancelled'

    def test_shipped_order_cannot_be_cancelled(self, order_buyer, request_order):
        with pytest.raises(InvalidStatusTransitionError):
            OrderService.update_order_status(request_order.id, order_buyer, OrderStatus.CANCELLED)

    def test_delivery_completes_request(
        self, order_buyer, order_seller, request_order, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            OrderService.update_order_status(request_order.id, order_seller, OrderStatus.DELIVERED)

        assert BuyerRequest.objects.get(id=request_order.request_id).status == RequestStatus.COMPLETED

        notification = Notification.objects.get(user=order_buyer)
        assert notification.type == NotificationType.ORDER_STATUS_UPDATED
        assert notification.message == 'Your order "Branded notebooks" has been delivered!'

    def test_delivered_is_terminal(self, order_seller, request_order):
        OrderService.update_order_status(request_order.id, order_seller, OrderStatus.DELIVERED)

        with pytest.raises(InvalidStatusTransitionError):
            OrderService.update_order_status(request_order.id, order_seller, OrderStatus.CANCELLED)


# =============================================================================
# Lookups
# =============================================================================

@pytest.mark.django_db
class TestOrderLookups:

    def test_buyer_and_seller_orders(self, order_buyer, order_seller, listing_order, request_order):
        assert OrderService.get_buyer_orders(order_buyer).count() == 2
        assert list(OrderService.get_seller_orders(order_seller, status=OrderStatus.SHIPPED)) == [request_order]
        assert OrderService.get_buyer_orders(order_seller).count() == 0

    def test_get_order_by_id_participants_only(self, order_buyer, order_outsider, listing_order):
        assert OrderService.get_order_by_id(listing_order.id, order_buyer) == listing_order

        with pytest.raises(InsufficientPermissionsError):
            OrderService.get_order_by_id(listing_order.id, order_outsider)

    def test_order_total(self, request_order):
        assert OrderService.get_order_total(request_order) == Decimal('22500.00')
