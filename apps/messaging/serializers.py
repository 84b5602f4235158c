from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from .models import Conversation, Message


class MessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Message
        fields = ['id', 'conversation', 'sender', 'content', 'read', 'created_at']
        read_only_fields = fields


class ConversationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Conversation
        fields = ['id', 'participant_1', 'participant_2', 'listing', 'request', 'created_at', 'updated_at']
        read_only_fields = fields


class ConversationSummarySerializer(serializers.Serializer):
    """Inbox row: conversation, who it is with, and the latest message."""

    conversation = ConversationSerializer()
    other_participant = UserPublicSerializer()
    last_message = MessageSerializer(allow_null=True)
    unread_count = serializers.IntegerField()


class ConversationDetailSerializer(serializers.Serializer):
    conversation = ConversationSerializer()
    other_participant = UserPublicSerializer()
    messages = MessageSerializer(many=True)


class StartConversationSerializer(serializers.Serializer):
    """Open (or find) a conversation with another user."""

    user = serializers.UUIDField()
    listing = serializers.UUIDField(required=False, allow_null=True)
    request = serializers.UUIDField(required=False, allow_null=True)


class SendMessageSerializer(serializers.Serializer):
    content = serializers.CharField(min_length=1, max_length=1000)


class UnreadMessageCountSerializer(serializers.Serializer):
    unread_count = serializers.IntegerField()


class MarkReadResponseSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
