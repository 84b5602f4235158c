from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'requests'

# Note: offers must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'offers', views.OfferViewSet, basename='offer')
router.register(r'', views.BuyerRequestViewSet, basename='request')

urlpatterns = [
    # Request ViewSet routes
    # GET    /api/requests/                 - Browse open requests
    # POST   /api/requests/                 - Post a request
    # GET    /api/requests/mine/            - Own requests
    # GET    /api/requests/count/           - Request count
    # GET    /api/requests/{id}/            - Request detail
    # PATCH  /api/requests/{id}/            - Update request
    # DELETE /api/requests/{id}/            - Delete request
    # GET    /api/requests/{id}/offers/     - Offers on a request

    # Offer routes
    # GET    /api/requests/offers/               - Own offers
    # POST   /api/requests/offers/               - Make or revise an offer
    # GET    /api/requests/offers/{id}/          - Offer detail
    # PATCH  /api/requests/offers/{id}/          - Revise offer
    # POST   /api/requests/offers/{id}/withdraw/ - Withdraw offer
    # POST   /api/requests/offers/{id}/accept/   - Accept offer (creates order)
    # POST   /api/requests/offers/{id}/reject/   - Reject offer

    path('', include(router.urls)),
]
