"""
Chatroom - a line-oriented text broadcast chat server.

Clients connect over TCP, pick a display name, then every line they type
is relayed to everyone else in the room.
"""

__version__ = '1.0.0'
