"""
Chat module for server-side messaging functionality.

Handles:
- Per-connection sessions and their handshake
- The registry of who is in the room
- Broadcasting lines to everyone else
"""
