import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Product, Category
from apps.orders.models import Order, OrderStatus, PaymentMethod
from apps.reviews.models import Review


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def seller(db):
    user = User.objects.create_user(
        email='seller@example.com',
        password='TestPass123!',
        display_name='Merkato Furniture',
    )
    Profile.objects.create(user=user, user_type=UserType.SELLER)
    return user


@pytest.fixture
def buyer(db):
    user = User.objects.create_user(
        email='buyer@example.com',
        password='TestPass123!',
        display_name='Hana',
    )
    Profile.objects.create(user=user, user_type=UserType.BUYER)
    return user


@pytest.fixture
def other_buyer(db):
    user = User.objects.create_user(
        email='buyer2@example.com',
        password='TestPass123!',
        display_name='Dawit',
    )
    Profile.objects.create(user=user, user_type=UserType.BUYER)
    return user


@pytest.fixture
def seller_client(seller):
    return _client_for(seller)


@pytest.fixture
def buyer_client(buyer):
    return _client_for(buyer)


@pytest.fixture
def other_buyer_client(other_buyer):
    return _client_for(other_buyer)


@pytest.fixture
def listing(seller):
    return Product.objects.create(
        seller=seller,
        title='Wooden Bookshelf',
        description='Five shelf bookshelf made of solid eucalyptus wood.',
        category=Category.FURNITURE,
        price=Decimal('3200.00'),
        inventory_quantity=4,
    )


def _order(buyer, seller, listing, status):
    return Order.objects.create(
        buyer=buyer,
        seller=seller,
        listing=listing,
        title=listing.title,
        description=listing.description,
        quantity=1,
        agreed_price=listing.price,
        delivery_location='Bole, Addis Ababa',
        delivery_phone='+251911000000',
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        status=status,
    )


@pytest.fixture
def delivered_order(buyer, seller, listing):
    return _order(buyer, seller, listing, OrderStatus.DELIVERED)


@pytest.fixture
def second_delivered_order(other_buyer, seller, listing):
    return _order(other_buyer, seller, listing, OrderStatus.DELIVERED)


@pytest.fixture
def shipped_order(buyer, seller, listing):
    return _order(buyer, seller, listing, OrderStatus.SHIPPED)


@pytest.fixture
def review(delivered_order, buyer, listing):
    return Review.objects.create(
        product=listing,
        buyer=buyer,
        order=delivered_order,
        rating=4,
        comment='Sturdy and well finished.',
        verified_purchase=True,
    )
