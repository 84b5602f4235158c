import pytest
import uuid
from django.urls import reverse
from rest_framework import status
from apps.messaging.models import Message


@pytest.mark.django_db
class TestConversationList:
    """Tests for /api/messages/"""

    def test_inbox(self, alice_client, conversation, messages):
        url = reverse('messaging:conversation-list')
        response = alice_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['other_participant']['display_name'] == 'Bob'
        assert response.data[0]['last_message']['content'] == 'I can deliver tomorrow.'
        assert response.data[0]['unread_count'] == 2

    def test_requires_auth(self, api_client):
        url = reverse('messaging:conversation-list')

        assert api_client.get(url).status_code == status.HTTP_401_UNAUTHORIZED

    def test_start_conversation(self, alice_client, bob):
        url = reverse('messaging:conversation-list')

        response = alice_client.post(url, {'user': str(bob.id)}, format='json')
        assert response.status_code == status.HTTP_201_CREATED

        response = alice_client.post(url, {'user': str(bob.id)}, format='json')
        assert response.status_code == status.HTTP_200_OK

    def test_start_with_self(self, alice_client, alice):
        url = reverse('messaging:conversation-list')
        response = alice_client.post(url, {'user': str(alice.id)}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_start_with_unknown_user(self, alice_client):
        url = reverse('messaging:conversation-list')
        response = alice_client.post(url, {'user': str(uuid.uuid4())}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestConversationDetail:

    def test_participant_reads(self, bob_client, conversation, messages):
        url = reverse('messaging:conversation-detail', args=[conversation.id])
        response = bob_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [m['content'] for m in response.data['messages']][0] == 'Is the desk still available?'

    def test_outsider_forbidden(self, carol_client, conversation):
        url = reverse('messaging:conversation-detail', args=[conversation.id])

        assert carol_client.get(url).status_code == status.HTTP_403_FORBIDDEN

    def test_missing(self, alice_client):
        url = reverse('messaging:conversation-detail', args=[uuid.uuid4()])

        assert alice_client.get(url).status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestSendAndRead:

    def test_send(self, alice_client, alice, conversation):
        url = reverse('messaging:send-message', args=[conversation.id])
        response = alice_client.post(url, {'content': 'When can you deliver?'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['sender'] == alice.id

    def test_empty_message(self, alice_client, conversation):
        url = reverse('messaging:send-message', args=[conversation.id])
        response = alice_client.post(url, {'content': ''}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_too_long_message(self, alice_client, conversation):
        url = reverse('messaging:send-message', args=[conversation.id])
        response = alice_client.post(url, {'content': 'x' * 1001}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_outsider_cannot_send(self, carol_client, conversation):
        url = reverse('messaging:send-message', args=[conversation.id])
        response = carol_client.post(url, {'content': 'Hi there'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Message.objects.count() == 0

    def test_mark_read_and_unread_count(self, alice_client, conversation, messages):
        unread_url = reverse('messaging:unread-count')
        assert alice_client.get(unread_url).data['unread_count'] == 2

        response = alice_client.post(reverse('messaging:mark-read', args=[conversation.id]))
        assert response.data == {'updated': 2}

        assert alice_client.get(unread_url).data['unread_count'] == 0
