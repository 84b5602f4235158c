from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['title', 'buyer', 'seller', 'quantity', 'agreed_price', 'status', 'created_at']
    list_filter = ['status', 'payment_method', 'created_at']
    search_fields = ['title', 'buyer__email', 'seller__email']
    readonly_fields = ['id', 'offer', 'created_at', 'updated_at']
    raw_id_fields = ['buyer', 'seller', 'request', 'listing']
    ordering = ['-created_at']
