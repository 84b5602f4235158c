import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user with a buyer+seller profile."""
    user = User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )
    Profile.objects.create(
        user=user,
        user_type=UserType.BOTH,
        first_name='Test',
        last_name='User',
        phone_number='+251911000000',
    )
    return user


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    user = User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        display_name='Inactive User',
        is_active=False,
    )
    Profile.objects.create(user=user)
    return user


@pytest.fixture
def other_user(db):
    """Create and return a seller."""
    user = User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        display_name='Other User',
    )
    Profile.objects.create(
        user=user,
        user_type=UserType.SELLER,
        first_name='Other',
        last_name='Seller',
        phone_number='+251922000000',
        bio='We sell office furniture.',
    )
    return user


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
