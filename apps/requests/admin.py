from django.contrib import admin
from .models import BuyerRequest, Offer, RequestStatus


class OfferInline(admin.TabularInline):
    model = Offer
    extra = 0
    fields = ['seller', 'price', 'delivery_timeline', 'status', 'created_at']
    readonly_fields = ['created_at']


@admin.register(BuyerRequest)
class BuyerRequestAdmin(admin.ModelAdmin):
    list_display = ['title', 'buyer', 'category', 'budget_min', 'budget_max', 'quantity', 'status', 'created_at']
    list_filter = ['status', 'category', 'created_at']
    search_fields = ['title', 'description', 'buyer__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']
    inlines = [OfferInline]

    @admin.action(description='Close selected requests')
    def close_requests(self, request, queryset):
        count = queryset.filter(status=RequestStatus.OPEN).update(status=RequestStatus.CLOSED)
        self.message_user(request, f'Closed {count} request(s).')

    actions = ['close_requests']


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ['request', 'seller', 'price', 'delivery_cost', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['request__title', 'seller__email', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']
