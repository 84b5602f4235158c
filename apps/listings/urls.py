from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'listings'

router = DefaultRouter()
router.register(r'', views.ProductViewSet, basename='listing')

urlpatterns = [
    # GET    /api/listings/                                  - Search active listings
    # POST   /api/listings/                                  - Publish listing
    # GET    /api/listings/{id}/                             - Listing detail (+1 view)
    # PATCH  /api/listings/{id}/                             - Update listing
    # DELETE /api/listings/{id}/                             - Delete listing
    # GET    /api/listings/mine/                             - Own listings
    # GET    /api/listings/similar/?title=                   - Duplicate warning
    # GET    /api/listings/count/                            - Listing count
    # GET    /api/listings/{id}/questions/                   - Q&A thread
    # POST   /api/listings/{id}/questions/                   - Ask question
    # POST   /api/listings/{id}/questions/{qid}/answer/      - Seller answer
    # DELETE /api/listings/{id}/questions/{qid}/             - Delete own question
    path('', include(router.urls)),
]
