import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Product, Category
from apps.orders.models import Order, OrderStatus, PaymentMethod
from apps.requests.models import BuyerRequest, Offer, OfferStatus, RequestStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


def _user(email, display_name, user_type):
    user = User.objects.create_user(
        email=email,
        password='TestPass123!',
        display_name=display_name,
    )
    Profile.objects.create(user=user, user_type=user_type)
    return user


@pytest.fixture
def order_buyer(db):
    return _user('buyer@example.com', 'Meron', UserType.BUYER)


@pytest.fixture
def order_seller(db):
    return _user('seller@example.com', 'Arat Kilo Stationery', UserType.SELLER)


@pytest.fixture
def order_outsider(db):
    return _user('outsider@example.com', 'Outsider', UserType.BOTH)


@pytest.fixture
def buyer_client(order_buyer):
    return _client_for(order_buyer)


@pytest.fixture
def seller_client(order_seller):
    return _client_for(order_seller)


@pytest.fixture
def outsider_client(order_outsider):
    return _client_for(order_outsider)


@pytest.fixture
def listing(order_seller):
    return Product.objects.create(
        seller=order_seller,
        title='Whiteboard 120x90',
        description='Magnetic dry erase whiteboard with aluminium frame.',
        category=Category.OFFICE_SUPPLIES,
        price=Decimal('2500.00'),
        inventory_quantity=3,
    )


@pytest.fixture
def listing_order(order_buyer, order_seller, listing):
    return Order.objects.create(
        buyer=order_buyer,
        seller=order_seller,
        listing=listing,
        title=listing.title,
        description=listing.description,
        quantity=2,
        agreed_price=listing.price,
        delivery_location='Arat Kilo, Addis Ababa',
        delivery_phone='+251911111111',
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
    )


@pytest.fixture
def request_order(order_buyer, order_seller):
    buyer_request = BuyerRequest.objects.create(
        buyer=order_buyer,
        title='Branded notebooks',
        description='500 notebooks printed with our company logo on the cover.',
        category=Category.OFFICE_SUPPLIES,
        quantity=500,
        status=RequestStatus.CLOSED,
    )
    offer = Offer.objects.create(
        seller=order_seller,
        request=buyer_request,
        price=Decimal('45.00'),
        description='A5 notebooks, 80 pages, full colour logo print on the cover.',
        delivery_timeline='3 weeks',
        status=OfferStatus.ACCEPTED,
    )
    return Order.objects.create(
        buyer=order_buyer,
        seller=order_seller,
        request=buyer_request,
        offer=offer,
        title=buyer_request.title,
        description=buyer_request.description,
        quantity=500,
        agreed_price=offer.price,
        status=OrderStatus.SHIPPED,
    )


@pytest.fixture
def checkout_data(listing):
    return {
        'listing': str(listing.id),
        'quantity': 1,
        'delivery_location': 'Sarbet, Addis Ababa',
        'delivery_phone': '+251922222222',
    }
