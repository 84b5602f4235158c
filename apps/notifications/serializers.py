from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):

    class Meta:
        model = Notification
        fields = [
            'id',
            'type',
            'title',
            'message',
            'link',
            'read',
            'created_at',
        ]
        read_only_fields = fields


class NotificationListQuerySerializer(serializers.Serializer):
    """Query parameters for the notification inbox."""
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100)


class UnreadCountSerializer(serializers.Serializer):
    unread_count = serializers.IntegerField()


class MarkAllReadResponseSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
