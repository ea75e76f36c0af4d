"""
Session store.

Holds the authenticated identity and its bearer token between calls:
- SessionStore protocol consumed by the API client
- In-memory store (tests, embedding)
- JSON file store that survives process restarts

Clearing an empty store is a no-op, so concurrent 401s are harmless.
"""

from .store import FileSessionStore, Identity, MemorySessionStore, SessionStore

__all__ = [
    "SessionStore",
    "Identity",
    "MemorySessionStore",
    "FileSessionStore",
]
