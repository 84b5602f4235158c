import pytest
import uuid
from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.accounts.services import delete_user_account
from apps.orders.models import Order
from apps.requests.models import BuyerRequest, Offer, OfferStatus, RequestStatus


# =============================================================================
# Request Tests
# =============================================================================

@pytest.mark.django_db
class TestRequestList:
    """Tests for GET /api/requests/"""

    def test_list_open_requests_public(self, api_client, buyer_request, closed_request):
        url = reverse('requests:request-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(buyer_request.id)
        assert response.data['results'][0]['buyer']['display_name'] == 'Selam Trading'

    def test_filter_by_category_and_search(self, api_client, buyer_request):
        url = reverse('requests:request-list')

        assert api_client.get(url, {'category': 'Electronics'}).data['count'] == 0
        assert api_client.get(url, {'search': 'desks'}).data['count'] == 1

    def test_exclude_own(self, buyer_client, buyer_request):
        url = reverse('requests:request-list')
        response = buyer_client.get(url, {'exclude_own': 'true'})

        assert response.data['count'] == 0

    def test_offer_count(self, api_client, buyer_request, offer, other_offer):
        url = reverse('requests:request-list')
        response = api_client.get(url)

        assert response.data['results'][0]['offer_count'] == 2


@pytest.mark.django_db
class TestRequestCreate:
    """Tests for POST /api/requests/"""

    def test_buyer_creates_open_request(self, buyer_client, request_data):
        url = reverse('requests:request-list')
        response = buyer_client.post(url, request_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == RequestStatus.OPEN
        assert response.data['offer_count'] == 0

    def test_status_in_payload_ignored(self, buyer_client, request_data):
        url = reverse('requests:request-list')
        request_data['status'] = 'completed'
        response = buyer_client.post(url, request_data, format='json')

        assert response.data['status'] == RequestStatus.OPEN

    def test_requires_auth(self, api_client, request_data):
        url = reverse('requests:request-list')
        response = api_client.post(url, request_data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_seller_only_profile_forbidden(self, seller_client, request_data):
        url = reverse('requests:request-list')
        response = seller_client.post(url, request_data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'Only buyers can post requests'

    def test_budget_max_below_min(self, buyer_client, request_data):
        url = reverse('requests:request-list')
        request_data['budget_max'] = '100.00'
        response = buyer_client.post(url, request_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'budget_max' in response.data

    def test_deadline_in_past(self, buyer_client, request_data):
        url = reverse('requests:request-list')
        request_data['deadline'] = str(timezone.now().date() - timedelta(days=1))
        response = buyer_client.post(url, request_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'deadline' in response.data

    def test_short_title(self, buyer_client, request_data):
        url = reverse('requests:request-list')
        request_data['title'] = 'Desk'
        response = buyer_client.post(url, request_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestRequestDetail:

    def test_retrieve(self, api_client, buyer_request):
        url = reverse('requests:request-detail', args=[buyer_request.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['title'] == 'Need 20 office desks'

    def test_retrieve_missing(self, api_client):
        url = reverse('requests:request-detail', args=[uuid.uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_owner_closes_request(self, buyer_client, buyer_request):
        url = reverse('requests:request-detail', args=[buyer_request.id])
        response = buyer_client.patch(url, {'status': 'closed'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == RequestStatus.CLOSED

    def test_other_user_cannot_update(self, seller_client, buyer_request):
        url = reverse('requests:request-detail', args=[buyer_request.id])
        response = seller_client.patch(url, {'quantity': 1}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_owner_deletes(self, buyer_client, buyer_request):
        url = reverse('requests:request-detail', args=[buyer_request.id])
        response = buyer_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not BuyerRequest.objects.filter(id=buyer_request.id).exists()


@pytest.mark.django_db
class TestRequestActions:

    def test_mine_includes_closed(self, buyer_client, buyer_request, closed_request):
        url = reverse('requests:request-mine')
        response = buyer_client.get(url)

        assert response.data['count'] == 2

    def test_count(self, api_client, buyer_request, closed_request):
        url = reverse('requests:request-count')

        assert api_client.get(url).data['count'] == 2
        assert api_client.get(url, {'status': 'open'}).data['count'] == 1

    def test_owner_sees_all_offers(self, buyer_client, buyer_request, offer, other_offer):
        url = reverse('requests:request-offers', args=[buyer_request.id])
        response = buyer_client.get(url)

        assert len(response.data) == 2

    def test_seller_sees_own_offer_only(self, seller_client, buyer_request, offer, other_offer):
        url = reverse('requests:request-offers', args=[buyer_request.id])
        response = seller_client.get(url)

        assert [item['id'] for item in response.data] == [str(offer.id)]


# =============================================================================
# Offer Tests
# =============================================================================

@pytest.mark.django_db
class TestOfferCreate:
    """Tests for POST /api/requests/offers/"""

    def test_seller_makes_offer(self, seller_client, offer_data):
        url = reverse('requests:offer-list')
        response = seller_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == OfferStatus.PENDING
        assert response.data['total_price'] == '73000.00'

    def test_resubmission_revises(self, seller_client, offer, offer_data):
        url = reverse('requests:offer-list')
        response = seller_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(offer.id)
        assert response.data['price'] == '72000.00'

    def test_buyer_cannot_offer(self, buyer_client, offer_data):
        url = reverse('requests:offer-list')
        response = buyer_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_short_description(self, seller_client, offer_data):
        url = reverse('requests:offer-list')
        offer_data['description'] = 'Cheap desks.'
        response = seller_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_request(self, seller_client, offer_data):
        url = reverse('requests:offer-list')
        offer_data['request'] = str(uuid.uuid4())
        response = seller_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_closed_request(self, seller_client, closed_request, offer_data):
        url = reverse('requests:offer-list')
        offer_data['request'] = str(closed_request.id)
        response = seller_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Request is no longer open'

    def test_deleted_buyers_request(self, seller_client, buyer, buyer_request, offer_data):
        delete_user_account(user_id=buyer.id, password='TestPass123!')

        url = reverse('requests:offer-list')
        response = seller_client.post(url, offer_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Request is no longer open'
        buyer_request.refresh_from_db()
        assert buyer_request.status == RequestStatus.CLOSED


@pytest.mark.django_db
class TestOfferReadUpdate:

    def test_list_own_offers(self, seller_client, other_seller_client, offer):
        url = reverse('requests:offer-list')

        assert seller_client.get(url).data['count'] == 1
        assert other_seller_client.get(url).data['count'] == 0

    def test_request_owner_can_view(self, buyer_client, offer):
        url = reverse('requests:offer-detail', args=[offer.id])

        assert buyer_client.get(url).status_code == status.HTTP_200_OK

    def test_other_seller_cannot_view(self, other_seller_client, offer):
        url = reverse('requests:offer-detail', args=[offer.id])

        assert other_seller_client.get(url).status_code == status.HTTP_403_FORBIDDEN

    def test_seller_revises(self, seller_client, offer):
        url = reverse('requests:offer-detail', args=[offer.id])
        response = seller_client.patch(url, {'price': '69000.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['price'] == '69000.00'

    def test_buyer_cannot_revise(self, buyer_client, offer):
        url = reverse('requests:offer-detail', args=[offer.id])
        response = buyer_client.patch(url, {'price': '1.00'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_withdraw(self, seller_client, offer):
        url = reverse('requests:offer-withdraw', args=[offer.id])
        response = seller_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == OfferStatus.WITHDRAWN

        response = seller_client.post(url)
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestOfferDecisionsApi:

    def test_accept_creates_single_order(self, buyer_client, buyer_request, offer, other_offer):
        url = reverse('requests:offer-accept', args=[offer.id])
        response = buyer_client.post(url, {'order_notes': 'Call on arrival'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'pending'
        assert response.data['order_notes'] == 'Call on arrival'

        assert Order.objects.filter(request=buyer_request).count() == 1
        assert Offer.objects.get(id=offer.id).status == OfferStatus.ACCEPTED
        assert Offer.objects.get(id=other_offer.id).status == OfferStatus.REJECTED
        assert BuyerRequest.objects.get(id=buyer_request.id).status == RequestStatus.CLOSED

    def test_seller_cannot_accept(self, seller_client, offer):
        url = reverse('requests:offer-accept', args=[offer.id])
        response = seller_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Order.objects.count() == 0

    def test_accept_twice(self, buyer_client, offer, other_offer):
        buyer_client.post(reverse('requests:offer-accept', args=[offer.id]))
        response = buyer_client.post(reverse('requests:offer-accept', args=[other_offer.id]))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Order.objects.count() == 1

    def test_reject(self, buyer_client, buyer_request, offer):
        url = reverse('requests:offer-reject', args=[offer.id])
        response = buyer_client.post(url, {'reason': 'Too slow'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == OfferStatus.REJECTED
        assert BuyerRequest.objects.get(id=buyer_request.id).status == RequestStatus.OPEN
