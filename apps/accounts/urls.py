from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # Current user
    path('user/', views.get_current_user, name='current-user'),
    path('user/profile/', views.update_profile, name='update-profile'),
    path('user/delete/', views.delete_account, name='delete-account'),

    # Public profiles
    path('profiles/<uuid:pk>/', views.public_profile, name='public-profile'),
]
