import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile
from apps.notifications.models import Notification, NotificationType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def recipient(db):
    user = User.objects.create_user(
        email='recipient@example.com',
        password='TestPass123!',
        display_name='Recipient',
    )
    Profile.objects.create(user=user)
    return user


@pytest.fixture
def other_user(db):
    user = User.objects.create_user(
        email='someoneelse@example.com',
        password='TestPass123!',
        display_name='Someone Else',
    )
    Profile.objects.create(user=user)
    return user


@pytest.fixture
def recipient_client(api_client, recipient):
    """Return API client authenticated as the recipient."""
    refresh = RefreshToken.for_user(recipient)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def notifications(recipient):
    """Three notifications: two unread, one read."""
    return [
        Notification.objects.create(
            user=recipient,
            type=NotificationType.NEW_OFFER,
            title='New Offer Received',
            message='You have a new offer for "Office chairs"',
            link='/buyer/requests/1',
        ),
        Notification.objects.create(
            user=recipient,
            type=NotificationType.ORDER_STATUS_UPDATED,
            title='Order Update',
            message='Your order "Office chairs" has been delivered!',
            link='/buyer/orders/1',
        ),
        Notification.objects.create(
            user=recipient,
            type=NotificationType.OFFER_ACCEPTED,
            title='Offer Accepted',
            message='Read already',
            read=True,
        ),
    ]
