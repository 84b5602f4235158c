from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Review ViewSet routes
    # GET    /api/reviews/                 - List reviews (?product=, ?buyer=, ?seller=, ?rating=)
    # POST   /api/reviews/                 - Review a delivered order
    # GET    /api/reviews/{id}/            - Get review
    # PATCH  /api/reviews/{id}/            - Update review
    # DELETE /api/reviews/{id}/            - Delete review

    # Custom review actions
    # GET    /api/reviews/mine/            - Current user's reviews
    # POST   /api/reviews/{id}/respond/    - Seller response
    # POST   /api/reviews/{id}/helpful/    - Helpful vote

    path('product/<uuid:product_id>/breakdown/', views.product_rating_breakdown, name='rating-breakdown'),
    path('seller/<uuid:seller_id>/', views.seller_reviews, name='seller-reviews'),
    path('order/<uuid:order_id>/', views.order_review, name='order-review'),

    # Include router URLs
    path('', include(router.urls)),
]
