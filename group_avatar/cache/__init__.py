"""
Group Avatar - Caches
=====================
This package contains the per-session conversation color cache.
"""

from group_avatar.cache.color_cache import (
    ConversationColorCache, ConversationColorCacheEntry, DEFAULT_MAX_CONVERSATIONS
)

__all__ = [
    'ConversationColorCache', 'ConversationColorCacheEntry', 'DEFAULT_MAX_CONVERSATIONS'
]
