import pytest
import uuid
from django.urls import reverse
from rest_framework import status
from apps.listings.models import Product
from apps.orders.models import Order, OrderStatus


@pytest.mark.django_db
class TestOrderList:
    """Tests for GET /api/orders/"""

    def test_buyer_orders_default(self, buyer_client, listing_order, request_order):
        url = reverse('orders:order-list')
        response = buyer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_seller_role(self, seller_client, listing_order):
        url = reverse('orders:order-list')

        assert seller_client.get(url).data['count'] == 0
        assert seller_client.get(url, {'role': 'seller'}).data['count'] == 1

    def test_status_filter(self, buyer_client, listing_order, request_order):
        url = reverse('orders:order-list')
        response = buyer_client.get(url, {'status': 'shipped'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(request_order.id)

    def test_invalid_role(self, buyer_client):
        url = reverse('orders:order-list')
        response = buyer_client.get(url, {'role': 'admin'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_auth(self, api_client):
        url = reverse('orders:order-list')

        assert api_client.get(url).status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCheckout:
    """Tests for POST /api/orders/"""

    def test_checkout(self, buyer_client, listing, checkout_data):
        url = reverse('orders:order-list')
        response = buyer_client.post(url, checkout_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == OrderStatus.PENDING
        assert response.data['payment_method'] == 'cash_on_delivery'
        assert response.data['total'] == '2500.00'
        assert Product.objects.get(id=listing.id).inventory_quantity == 2

    def test_missing_delivery_details(self, buyer_client, checkout_data):
        url = reverse('orders:order-list')
        del checkout_data['delivery_phone']
        response = buyer_client.post(url, checkout_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'delivery_phone' in response.data

    def test_over_inventory(self, buyer_client, checkout_data):
        url = reverse('orders:order-list')
        checkout_data['quantity'] = 10
        response = buyer_client.post(url, checkout_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['detail'] == 'Only 3 item(s) left in stock.'
        assert Order.objects.count() == 0

    def test_own_listing(self, seller_client, checkout_data):
        url = reverse('orders:order-list')
        response = seller_client.post(url, checkout_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestOrderDetail:

    def test_participants_can_view(self, buyer_client, seller_client, listing_order):
        url = reverse('orders:order-detail', args=[listing_order.id])

        assert buyer_client.get(url).status_code == status.HTTP_200_OK
        response = seller_client.get(url)
        assert response.data['buyer']['display_name'] == 'Meron'

    def test_outsider_gets_404(self, outsider_client, listing_order):
        url = reverse('orders:order-detail', args=[listing_order.id])

        assert outsider_client.get(url).status_code == status.HTTP_404_NOT_FOUND

    def test_missing(self, buyer_client):
        url = reverse('orders:order-detail', args=[uuid.uuid4()])

        assert buyer_client.get(url).status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestOrderStatusUpdate:
    """Tests for POST /api/orders/{id}/status/"""

    def test_seller_accepts(self, seller_client, listing_order):
        url = reverse('orders:order-update-status', args=[listing_order.id])
        response = seller_client.post(url, {'status': 'accepted'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == OrderStatus.ACCEPTED

    def test_buyer_cannot_ship(self, buyer_client, listing_order):
        url = reverse('orders:order-update-status', args=[listing_order.id])
        response = buyer_client.post(url, {'status': 'accepted'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_buyer_cancels(self, buyer_client, listing_order):
        url = reverse('orders:order-update-status', args=[listing_order.id])
        response = buyer_client.post(url, {'status': 'cancelled'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == OrderStatus.CANCELLED

    def test_illegal_transition(self, seller_client, listing_order):
        url = reverse('orders:order-update-status', args=[listing_order.id])
        response = seller_client.post(url, {'status': 'shipped'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['detail'] == 'Cannot change order from pending to shipped.'

    def test_unknown_status(self, seller_client, listing_order):
        url = reverse('orders:order-update-status', args=[listing_order.id])
        response = seller_client.post(url, {'status': 'lost'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_buyer_list_body_is_forbidden(self, buyer_client, listing_order):
        url = reverse('orders:order-update-status', args=[listing_order.id])
        response = buyer_client.post(url, ['cancelled'], format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        listing_order.refresh_from_db()
        assert listing_order.status == OrderStatus.PENDING
