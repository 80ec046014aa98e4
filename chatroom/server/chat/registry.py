"""
Registry of named sessions.

Maps each live, named session to its display name. The registry does no
locking of its own: every call is made by ChatServer while it holds the
broadcast lock, so a snapshot can never race with a removal.
"""

from typing import Dict, Optional, Set


class Registry:
    """Who is in the room, keyed by session."""
    
    def __init__(self):
        self._names: Dict[object, str] = {}  # session -> display name
    
    def insert(self, session, name: str):
        self._names[session] = name
    
    def remove(self, session) -> Optional[str]:
        """Remove a session, returning its name, or None if it was not registered."""
        return self._names.pop(session, None)
    
    def snapshot_excluding(self, session) -> Set[object]:
        """Return every registered session except the given one."""
        everyone = set(self._names)
        everyone.discard(session)
        return everyone
    
    def lookup_name(self, session) -> Optional[str]:
        return self._names.get(session)
    
    def __contains__(self, session) -> bool:
        return session in self._names
    
    def __len__(self) -> int:
        return len(self._names)
