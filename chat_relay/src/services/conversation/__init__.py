"""Conversation service package."""

from .conversation_assembler import ConversationAssembler

__all__ = ["ConversationAssembler"]
