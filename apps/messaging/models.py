from django.db import models
import uuid


class Conversation(models.Model):
    """Private thread between two users, optionally about a listing or request."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    participant_1 = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='conversations_as_first',
    )
    participant_2 = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='conversations_as_second',
    )
    listing = models.ForeignKey(
        'listings.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='conversations',
    )
    request = models.ForeignKey(
        'requests.BuyerRequest',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='conversations',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'conversations'
        indexes = [
            models.Index(fields=['participant_1', 'updated_at'], name='conv_p1_updated_idx'),
            models.Index(fields=['participant_2', 'updated_at'], name='conv_p2_updated_idx'),
        ]
        ordering = ['-updated_at']

    def __str__(self):
        return f"Conversation {self.participant_1_id} / {self.participant_2_id}"

    def has_participant(self, user):
        return user.id in (self.participant_1_id, self.participant_2_id)

    def other_participant(self, user):
        if user.id == self.participant_1_id:
            return self.participant_2
        return self.participant_1


class Message(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    conversation = models.ForeignKey(Conversation, on_delete=models.CASCADE, related_name='messages')
    sender = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='sent_messages')
    content = models.TextField(max_length=1000)
    read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'messages'
        indexes = [
            models.Index(fields=['conversation', 'created_at'], name='msg_conv_created_idx'),
            models.Index(fields=['conversation', 'read'], name='msg_conv_read_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.sender_id}: {self.content[:40]}"
