import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Category
from apps.requests.models import BuyerRequest, Offer, RequestStatus


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
def buyer(db):
    return _user('buyer@example.com', 'Selam Trading', UserType.BUYER)


@pytest.fixture
def seller(db):
    return _user('seller@example.com', 'Piassa Furniture', UserType.SELLER)


@pytest.fixture
def other_seller(db):
    return _user('seller2@example.com', 'Kazanchis Interiors', UserType.BOTH)


@pytest.fixture
def buyer_client(buyer):
    return _client_for(buyer)


@pytest.fixture
def seller_client(seller):
    return _client_for(seller)


@pytest.fixture
def other_seller_client(other_seller):
    return _client_for(other_seller)


@pytest.fixture
def buyer_request(buyer):
    return BuyerRequest.objects.create(
        buyer=buyer,
        title='Need 20 office desks',
        description='Looking for 20 sturdy office desks for a new branch office.',
        category=Category.FURNITURE,
        budget_min=Decimal('50000.00'),
        budget_max=Decimal('80000.00'),
        quantity=20,
        deadline=timezone.now().date() + timedelta(days=14),
        delivery_location='Bole, Addis Ababa',
    )


@pytest.fixture
def closed_request(buyer):
    return BuyerRequest.objects.create(
        buyer=buyer,
        title='Printer toner cartridges',
        description='Need HP 85A toner cartridges, ten pieces, original only.',
        category=Category.OFFICE_SUPPLIES,
        status=RequestStatus.CLOSED,
    )


OFFER_DESCRIPTION = (
    'Solid wood desks with steel frame, assembled on site, one year warranty included.'
)


@pytest.fixture
def offer(seller, buyer_request):
    return Offer.objects.create(
        seller=seller,
        request=buyer_request,
        price=Decimal('70000.00'),
        description=OFFER_DESCRIPTION,
        delivery_timeline='10 days',
        delivery_cost=Decimal('1500.00'),
    )


@pytest.fixture
def other_offer(other_seller, buyer_request):
    return Offer.objects.create(
        seller=other_seller,
        request=buyer_request,
        price=Decimal('65000.00'),
        description=OFFER_DESCRIPTION,
        delivery_timeline='2 weeks',
    )


@pytest.fixture
def request_data():
    return {
        'title': 'Conference room chairs',
        'description': 'Twelve padded conference chairs, black, with armrests.',
        'category': 'Furniture',
        'budget_min': '12000.00',
        'budget_max': '24000.00',
        'quantity': 12,
        'delivery_location': 'Piassa, Addis Ababa',
    }


@pytest.fixture
def offer_data(buyer_request):
    return {
        'request': str(buyer_request.id),
        'price': '72000.00',
        'description': OFFER_DESCRIPTION,
        'delivery_timeline': '7 days',
        'delivery_cost': '1000.00',
    }
