from django.urls import path
from . import views

app_name = 'messaging'

urlpatterns = [
    path('', views.conversation_list, name='conversation-list'),
    path('unread-count/', views.unread_count, name='unread-count'),
    path('<uuid:pk>/', views.conversation_detail, name='conversation-detail'),
    path('<uuid:pk>/send/', views.send, name='send-message'),
    path('<uuid:pk>/read/', views.mark_read, name='mark-read'),
]
