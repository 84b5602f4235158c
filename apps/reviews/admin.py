from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ['product', 'buyer', 'rating', 'verified_purchase', 'helpful_count', 'created_at']
    list_filter = ['rating', 'verified_purchase', 'created_at']
    search_fields = ['product__title', 'buyer__email', 'comment']
    readonly_fields = ['id', 'order', 'helpful_count', 'created_at', 'updated_at']
    ordering = ['-created_at']
