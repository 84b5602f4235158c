import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Profile, UserType
from apps.messaging.models import Conversation, Message


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
def alice(db):
    return _user('alice@example.com', 'Alice', UserType.BUYER)


@pytest.fixture
def bob(db):
    return _user('bob@example.com', 'Bob', UserType.SELLER)


@pytest.fixture
def carol(db):
    return _user('carol@example.com', 'Carol', UserType.BOTH)


@pytest.fixture
def alice_client(alice):
    return _client_for(alice)


@pytest.fixture
def bob_client(bob):
    return _client_for(bob)


@pytest.fixture
def carol_client(carol):
    return _client_for(carol)


@pytest.fixture
def conversation(alice, bob):
    return Conversation.objects.create(participant_1=alice, participant_2=bob)


@pytest.fixture
def messages(conversation, alice, bob):
    return [
        Message.objects.create(conversation=conversation, sender=alice, content='Is the desk still available?'),
        Message.objects.create(conversation=conversation, sender=bob, content='Yes, it is.'),
        Message.objects.create(conversation=conversation, sender=bob, content='I can deliver tomorrow.'),
    ]
