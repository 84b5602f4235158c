from django.contrib import admin
from .models import Conversation, Message


class MessageInline(admin.TabularInline):
    model = Message
    extra = 0
    fields = ['sender', 'content', 'read', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ['id', 'participant_1', 'participant_2', 'listing', 'request', 'updated_at']
    search_fields = ['participant_1__email', 'participant_2__email']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-updated_at']
    inlines = [MessageInline]


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ['conversation', 'sender', 'read', 'created_at']
    list_filter = ['read', 'created_at']
    search_fields = ['content', 'sender__email']
    readonly_fields = ['created_at']
