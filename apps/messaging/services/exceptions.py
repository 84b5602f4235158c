"""Domain exceptions for messaging app."""


class MessagingServiceError(Exception):
    """Base exception for messaging service errors."""
    pass


class ConversationNotFoundError(MessagingServiceError):
    pass


class NotAParticipantError(MessagingServiceError):
    """User is not one of the two participants of the conversation."""
    pass


class SelfConversationError(MessagingServiceError):
    """A user tried to open a conversation with themself."""
    pass


class RecipientNotFoundError(MessagingServiceError):
    pass
