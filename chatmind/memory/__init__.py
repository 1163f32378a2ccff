"""Conversation memory package.

Architectural role:
    Holds the per-session `ConversationContext`: bounded turn history, session
    topics, expertise profile and interaction memory. State lives only as long as
    the owning session; nothing is persisted.
"""
