"""Services for messaging business logic."""

from .exceptions import (
    MessagingServiceError,
    ConversationNotFoundError,
    NotAParticipantError,
    SelfConversationError,
    RecipientNotFoundError,
)
from .conversations import (
    get_or_create_conversation,
    get_user_conversations,
    get_conversation_with_messages,
    send_message,
    mark_messages_read,
    get_unread_message_count,
    get_conversations_by_request,
)

__all__ = [
    # Exceptions
    'MessagingServiceError',
    'ConversationNotFoundError',
    'NotAParticipantError',
    'SelfConversationError',
    'RecipientNotFoundError',
    # Services
    'get_or_create_conversation',
    'get_user_conversations',
    'get_conversation_with_messages',
    'send_message',
    'mark_messages_read',
    'get_unread_message_count',
    'get_conversations_by_request',
]
