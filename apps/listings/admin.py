from django.contrib import admin
from .models import Product, ProductQuestion


class ProductQuestionInline(admin.TabularInline):
    model = ProductQuestion
    extra = 0
    fields = ['author', 'content', 'is_seller_answer', 'parent', 'created_at']
    readonly_fields = ['created_at']
    raw_id_fields = ['author', 'parent']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        'title',
        'seller',
        'category',
        'price',
        'status',
        'inventory_quantity',
        'views',
        'average_rating',
        'review_count',
        'created_at',
    ]
    list_filter = ['status', 'category', 'created_at']
    search_fields = ['title', 'description', 'seller__email']
    readonly_fields = ['title_normalized', 'views', 'average_rating', 'review_count', 'created_at', 'updated_at']
    raw_id_fields = ['seller']
    inlines = [ProductQuestionInline]
    ordering = ['-created_at']

    actions = ['deactivate_listings']

    @admin.action(description='Deactivate selected listings')
    def deactivate_listings(self, request, queryset):
        count = queryset.update(status='inactive')
        self.message_user(request, f'Deactivated {count} listing(s).')
