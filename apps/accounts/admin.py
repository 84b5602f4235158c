from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, Profile


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    fields = [
        'user_type',
        ('first_name', 'last_name'),
        'phone_number',
        'avatar_url',
        'bio',
        ('rating', 'total_reviews'),
    ]
    readonly_fields = ['rating', 'total_reviews']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for marketplace accounts with the profile inline."""

    inlines = [ProfileInline]

    list_display = [
        'email',
        'display_name',
        'user_type',
        'is_active_badge',
        'is_staff',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'profile__user_type',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
        'profile__first_name',
        'profile__last_name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login', 'deleted_at'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'last_login', 'deleted_at']
    filter_horizontal = ['groups', 'user_permissions']

    actions = ['deactivate_users', 'anonymize_users']

    @admin.display(description='Type', ordering='profile__user_type')
    def user_type(self, obj):
        profile = getattr(obj, 'profile', None)
        return profile.get_user_type_display() if profile else '-'

    @admin.display(description='Status', ordering='is_active')
    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #2E7D32; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #C62828; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Inactive</span>'
        )

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (superusers are skipped)."""
        count = queryset.filter(is_superuser=False).update(is_active=False)
        self.message_user(request, f'Deactivated {count} user(s).')

    @admin.action(description='Anonymize selected users (IRREVERSIBLE)')
    def anonymize_users(self, request, queryset):
        """Anonymize selected non-staff users."""
        count = 0
        for user in queryset.filter(is_superuser=False, is_staff=False):
            user.anonymize()
            count += 1
        self.message_user(request, f'Anonymized {count} user(s).')

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('profile')


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'user_type', 'first_name', 'last_name', 'rating', 'total_reviews']
    list_filter = ['user_type']
    search_fields = ['user__email', 'first_name', 'last_name']
    readonly_fields = ['rating', 'total_reviews', 'created_at', 'updated_at']
