"""Conversation and message service."""

from django.db import transaction
from django.db.models import Q, Count, QuerySet, Prefetch
from django.utils import timezone
from uuid import UUID
from typing import Optional, List, Dict, Any
import logging

from apps.accounts.models import User
from ..models import Conversation, Message
from .exceptions import (
    ConversationNotFoundError,
    NotAParticipantError,
    SelfConversationError,
    RecipientNotFoundError,
)

logger = logging.getLogger(__name__)


def _participant_filter(user: User) -> Q:
    return Q(participant_1=user) | Q(participant_2=user)


@transaction.atomic
def get_or_create_conversation(
    *,
    user: User,
    other_user_id: UUID,
    listing_id: Optional[UUID] = None,
    request_id: Optional[UUID] = None
) -> tuple[Conversation, bool]:
    """
    Find the conversation between two users about a listing/request, or start one.

    Participant order does not matter: (a, b) and (b, a) are the same
    conversation.

    Returns:
        Tuple of (conversation, created)

    Raises:
        SelfConversationError: If both participants are the same user
        RecipientNotFoundError: If the other user doesn't exist or is inactive
    """
    if user.id == other_user_id:
        raise SelfConversationError("You cannot start a conversation with yourself")

    try:
        other_user = User.objects.get(id=other_user_id, is_active=True)
    except User.DoesNotExist:
        raise RecipientNotFoundError("User not found")

    existing = (
        Conversation.objects
        .filter(
            Q(participant_1=user, participant_2=other_user) |
            Q(participant_1=other_user, participant_2=user),
            listing_id=listing_id,
            request_id=request_id,
        )
        .first()
    )
    if existing:
        return existing, False

    conversation = Conversation.objects.create(
        participant_1=user,
        participant_2=other_user,
        listing_id=listing_id,
        request_id=request_id,
    )
    logger.info("Conversation %s started between %s and %s", conversation.id, user.id, other_user.id)
    return conversation, True


def get_user_conversations(*, user: User) -> List[Dict[str, Any]]:
    """
    The user's conversations, most recently active first.

    Returns:
        List of dicts with keys: conversation, other_participant,
        last_message (or None) and unread_count
    """
    conversations = (
        Conversation.objects
        .filter(_participant_filter(user))
        .select_related(
            'participant_1', 'participant_1__profile',
            'participant_2', 'participant_2__profile',
            'listing', 'request',
        )
        .annotate(
            unread_count=Count(
                'messages',
                filter=Q(messages__read=False) & ~Q(messages__sender=user),
            )
        )
        .prefetch_related(
            Prefetch('messages', queryset=Message.objects.order_by('-created_at'), to_attr='messages_newest_first')
        )
        .order_by('-updated_at')
    )

    results = []
    for conversation in conversations:
        newest = conversation.messages_newest_first
        results.append({
            'conversation': conversation,
            'other_participant': conversation.other_participant(user),
            'last_message': newest[0] if newest else None,
            'unread_count': conversation.unread_count,
        })
    return results


def get_conversation_with_messages(*, conversation_id: UUID, user: User) -> Dict[str, Any]:
    """
    A conversation with all of its messages, oldest first.

    Raises:
        ConversationNotFoundError: If the conversation doesn't exist
        NotAParticipantError: If user is not a participant
    """
    conversation = _get_conversation_for_participant(conversation_id=conversation_id, user=user)

    messages = conversation.messages.select_related('sender').order_by('created_at')

    return {
        'conversation': conversation,
        'other_participant': conversation.other_participant(user),
        'messages': list(messages),
    }


def _get_conversation_for_participant(*, conversation_id: UUID, user: User) -> Conversation:
    try:
        conversation = (
            Conversation.objects
            .select_related(
                'participant_1', 'participant_1__profile',
                'participant_2', 'participant_2__profile',
            )
            .get(id=conversation_id)
        )
    except Conversation.DoesNotExist:
        raise ConversationNotFoundError("Conversation not found")

    if not conversation.has_participant(user):
        raise NotAParticipantError("You are not a participant of this conversation")

    return conversation


@transaction.atomic
def send_message(*, conversation_id: UUID, sender: User, content: str) -> Message:
    """
    Post a message and bump the conversation's updated_at.

    Raises:
        ConversationNotFoundError: If the conversation doesn't exist
        NotAParticipantError: If sender is not a participant
    """
    conversation = _get_conversation_for_participant(conversation_id=conversation_id, user=sender)

    message = Message.objects.create(
        conversation=conversation,
        sender=sender,
        content=content,
    )

    Conversation.objects.filter(id=conversation.id).update(updated_at=timezone.now())
    return message


def mark_messages_read(*, conversation_id: UUID, user: User) -> int:
    """
    Mark the other participant's messages in a conversation as read.

    Returns:
        Number of messages updated

    Raises:
        ConversationNotFoundError: If the conversation doesn't exist
        NotAParticipantError: If user is not a participant
    """
    conversation = _get_conversation_for_participant(conversation_id=conversation_id, user=user)

    return (
        Message.objects
        .filter(conversation=conversation, read=False)
        .exclude(sender=user)
        .update(read=True)
    )


def get_unread_message_count(*, user: User) -> int:
    """Unread messages sent to the user across all conversations."""
    conversation_ids = Conversation.objects.filter(_participant_filter(user)).values('id')
    return (
        Message.objects
        .filter(conversation_id__in=conversation_ids, read=False)
        .exclude(sender=user)
        .count()
    )


def get_conversations_by_request(*, request_id: UUID) -> QuerySet[Conversation]:
    return Conversation.objects.filter(request_id=request_id).order_by('-updated_at')
