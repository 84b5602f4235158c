import pytest
from apps.orders.serializers import (
    CheckoutSerializer,
    OrderFilterSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
)
from apps.orders.models import PaymentMethod


# =============================================================================
# CheckoutSerializer Tests
# =============================================================================

class TestCheckoutSerializer:
    """Tests for CheckoutSerializer input validation."""

    def test_defaults(self):
        serializer = CheckoutSerializer(data={
            'listing': 'a3b8d1b6-0b3b-4b1a-9c1a-7b2e2f1e4c3d',
            'delivery_location': 'Bole',
            'delivery_phone': '+251911000000',
        })

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['quantity'] == 1
        assert serializer.validated_data['payment_method'] == PaymentMethod.CASH_ON_DELIVERY

    def test_zero_quantity(self):
        serializer = CheckoutSerializer(data={
            'listing': 'a3b8d1b6-0b3b-4b1a-9c1a-7b2e2f1e4c3d',
            'quantity': 0,
            'delivery_location': 'Bole',
            'delivery_phone': '+251911000000',
        })

        assert not serializer.is_valid()
        assert 'quantity' in serializer.errors

    def test_unknown_payment_method(self):
        serializer = CheckoutSerializer(data={
            'listing': 'a3b8d1b6-0b3b-4b1a-9c1a-7b2e2f1e4c3d',
            'delivery_location': 'Bole',
            'delivery_phone': '+251911000000',
            'payment_method': 'credit_card',
        })

        assert not serializer.is_valid()
        assert 'payment_method' in serializer.errors


# =============================================================================
# Filter and status serializers
# =============================================================================

class TestOrderFilterSerializer:

    def test_role_defaults_to_buyer(self):
        serializer = OrderFilterSerializer(data={})

        assert serializer.is_valid()
        assert serializer.validated_data['role'] == 'buyer'

    @pytest.mark.parametrize('value', ['pending', 'accepted', 'shipped', 'delivered', 'cancelled'])
    def test_status_values(self, value):
        assert OrderStatusUpdateSerializer(data={'status': value}).is_valid()

    def test_bad_status(self):
        assert not OrderStatusUpdateSerializer(data={'status': 'refunded'}).is_valid()


# =============================================================================
# OrderSerializer
# =============================================================================

@pytest.mark.django_db
class TestOrderSerializer:

    def test_total_and_currency(self, listing_order, settings):
        settings.MARKETPLACE_CURRENCY = 'USD'

        data = OrderSerializer(listing_order).data

        assert data['total'] == '5000.00'
        assert data['currency'] == 'USD'
