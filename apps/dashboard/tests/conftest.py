import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Product, Category, ListingStatus
from apps.orders.models import Order, OrderStatus
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


OFFER_DESCRIPTION = 'Quality items delivered to your office, installation and warranty included.'


@pytest.fixture
def dashboard_buyer(db):
    return _user('buyer@example.com', 'Buyer', UserType.BUYER)


@pytest.fixture
def dashboard_seller(db):
    return _user('seller@example.com', 'Seller', UserType.SELLER)


@pytest.fixture
def buyer_client(dashboard_buyer):
    return _client_for(dashboard_buyer)


@pytest.fixture
def seller_client(dashboard_seller):
    return _client_for(dashboard_seller)


@pytest.fixture
def marketplace(dashboard_buyer, dashboard_seller):
    """
    Buyer with one request per status; seller with offers in every
    decision state, two listings and a delivered order.
    """
    open_request = BuyerRequest.objects.create(
        buyer=dashboard_buyer,
        title='Office chairs for reception',
        description='Six chairs for the reception area, fabric upholstery.',
        category=Category.FURNITURE,
    )
    second_open = BuyerRequest.objects.create(
        buyer=dashboard_buyer,
        title='Paper shredder',
        description='Cross cut shredder for confidential documents.',
        category=Category.OFFICE_SUPPLIES,
    )
    closed_request = BuyerRequest.objects.create(
        buyer=dashboard_buyer,
        title='Network switch',
        description='24 port gigabit managed switch for the server room.',
        category=Category.ELECTRONICS,
        status=RequestStatus.CLOSED,
    )
    completed_request = BuyerRequest.objects.create(
        buyer=dashboard_buyer,
        title='Meeting table',
        description='Oval meeting table for ten people, walnut finish.',
        category=Category.FURNITURE,
        status=RequestStatus.COMPLETED,
    )

    def offer(buyer_request, status):
        return Offer.objects.create(
            seller=dashboard_seller,
            request=buyer_request,
            price=Decimal('1000.00'),
            description=OFFER_DESCRIPTION,
            delivery_timeline='1 week',
            status=status,
        )

    offer(open_request, OfferStatus.PENDING)
    offer(second_open, OfferStatus.WITHDRAWN)
    offer(closed_request, OfferStatus.REJECTED)
    accepted = offer(completed_request, OfferStatus.ACCEPTED)

    Order.objects.create(
        buyer=dashboard_buyer,
        seller=dashboard_seller,
        request=completed_request,
        offer=accepted,
        title=completed_request.title,
        agreed_price=accepted.price,
        status=OrderStatus.DELIVERED,
    )

    Product.objects.create(
        seller=dashboard_seller,
        title='Desk lamp',
        description='LED desk lamp with adjustable arm.',
        category=Category.ELECTRONICS,
        price=Decimal('800.00'),
        inventory_quantity=10,
    )
    Product.objects.create(
        seller=dashboard_seller,
        title='Old printer',
        description='Laser printer, toner included.',
        category=Category.ELECTRONICS,
        price=Decimal('3000.00'),
        status=ListingStatus.INACTIVE,
    )

    return {
        'open_request': open_request,
        'second_open': second_open,
    }
