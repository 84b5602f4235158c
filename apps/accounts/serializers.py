from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, Profile, UserType


class ProfileSerializer(serializers.ModelSerializer):
    """Own profile, including contact details."""

    first_name = serializers.CharField(min_length=1, max_length=50, required=False)
    last_name = serializers.CharField(min_length=1, max_length=50, required=False)
    bio = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    is_buyer = serializers.BooleanField(read_only=True)
    is_seller = serializers.BooleanField(read_only=True)

    class Meta:
        model = Profile
        fields = [
            'user_type',
            'first_name',
            'last_name',
            'avatar_url',
            'bio',
            'phone_number',
            'rating',
            'total_reviews',
            'is_buyer',
            'is_seller',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['rating', 'total_reviews', 'created_at', 'updated_at']


class PublicProfileSerializer(serializers.ModelSerializer):
    """Profile as other users see it (no email or phone)."""

    id = serializers.UUIDField(source='user_id', read_only=True)
    display_name = serializers.CharField(source='user.get_display_name', read_only=True)

    class Meta:
        model = Profile
        fields = [
            'id',
            'display_name',
            'user_type',
            'first_name',
            'last_name',
            'avatar_url',
            'bio',
            'rating',
            'total_reviews',
            'created_at',
        ]
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """Current user with nested profile."""

    profile = ProfileSerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'created_at',
            'last_login',
            'profile',
        ]
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Serializer for user registration."""

    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    user_type = serializers.ChoiceField(choices=UserType.choices, default=UserType.BOTH)
    first_name = serializers.CharField(max_length=50, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=50, required=False, allow_blank=True)
    phone_number = serializers.CharField(max_length=30, required=False, allow_blank=True)

    class Meta:
        model = User
        fields = [
            'email',
            'password',
            'password_confirm',
            'display_name',
            'user_type',
            'first_name',
            'last_name',
            'phone_number',
        ]

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class DeleteAccountSerializer(serializers.Serializer):
    password = serializers.CharField(help_text="Current password for confirmation")
    confirm = serializers.BooleanField(help_text="Must be true to confirm deletion")

    def validate_confirm(self, value):
        if not value:
            raise serializers.ValidationError('Confirmation required')
        return value


class UserPublicSerializer(serializers.ModelSerializer):
    """Minimal user reference embedded in listings, offers, orders and reviews."""

    display_name = serializers.CharField(source='get_display_name', read_only=True)
    avatar_url = serializers.SerializerMethodField()
    rating = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name', 'avatar_url', 'rating']
        read_only_fields = fields

    def get_avatar_url(self, obj):
        profile = getattr(obj, 'profile', None)
        return profile.avatar_url if profile else ''

    def get_rating(self, obj):
        profile = getattr(obj, 'profile', None)
        return str(profile.rating) if profile else None
