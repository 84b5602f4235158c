from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('buyer/', views.buyer_dashboard, name='buyer'),
    path('seller/', views.seller_dashboard, name='seller'),
    path('home-stats/', views.home_stats, name='home-stats'),
]
