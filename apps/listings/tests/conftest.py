import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Product, ProductQuestion, Category, ListingStatus


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
        display_name='Addis Office Supply',
    )
    Profile.objects.create(user=user, user_type=UserType.SELLER, first_name='Almaz', last_name='Tesfaye')
    return user


@pytest.fixture
def other_seller(db):
    user = User.objects.create_user(
        email='seller2@example.com',
        password='TestPass123!',
        display_name='Bole Electronics',
    )
    Profile.objects.create(user=user, user_type=UserType.BOTH)
    return user


@pytest.fixture
def buyer(db):
    user = User.objects.create_user(
        email='buyer@example.com',
        password='TestPass123!',
        display_name='Buyer',
    )
    Profile.objects.create(user=user, user_type=UserType.BUYER)
    return user


@pytest.fixture
def seller_client(seller):
    return _client_for(seller)


@pytest.fixture
def other_seller_client(other_seller):
    return _client_for(other_seller)


@pytest.fixture
def buyer_client(buyer):
    return _client_for(buyer)


@pytest.fixture
def listing(seller):
    return Product.objects.create(
        seller=seller,
        title='Ergonomic Office Chair',
        description='Adjustable mesh office chair with lumbar support and armrests.',
        category=Category.FURNITURE,
        price=Decimal('4500.00'),
        inventory_quantity=10,
        specifications={'color': 'black', 'material': 'mesh'},
    )


@pytest.fixture
def cheap_listing(seller):
    return Product.objects.create(
        seller=seller,
        title='A4 Printer Paper Box',
        description='Box of five reams of 80gsm A4 printer paper for the office.',
        category=Category.OFFICE_SUPPLIES,
        price=Decimal('950.00'),
        inventory_quantity=50,
        views=40,
    )


@pytest.fixture
def inactive_listing(other_seller):
    return Product.objects.create(
        seller=other_seller,
        title='Used Laptop Dell Latitude',
        description='Dell Latitude laptop, 8GB RAM, 256GB SSD, minor scratches.',
        category=Category.ELECTRONICS,
        price=Decimal('25000.00'),
        inventory_quantity=1,
        status=ListingStatus.INACTIVE,
    )


@pytest.fixture
def question(listing, buyer):
    return ProductQuestion.objects.create(
        product=listing,
        author=buyer,
        content='Does the chair come assembled?',
    )


@pytest.fixture
def listing_data():
    return {
        'title': 'Standing Desk Frame',
        'description': 'Electric height adjustable standing desk frame, dual motor.',
        'category': 'Furniture',
        'price': '12000.00',
        'inventory_quantity': 5,
        'images': ['https://cdn.example.com/desk-1.jpg'],
        'specifications': {'max_height_cm': 125},
    }
