from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

router = DefaultRouter()
router.register(r'', views.OrderViewSet, basename='order')

urlpatterns = [
    # Order ViewSet routes
    # GET    /api/orders/              - Own orders (?role=buyer|seller, ?status=)
    # POST   /api/orders/              - Checkout a listing
    # GET    /api/orders/{id}/         - Order detail
    # POST   /api/orders/{id}/status/  - Change order status

    path('', include(router.urls)),
]
