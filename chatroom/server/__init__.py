"""
Server package for the chatroom.

This package contains all server-side functionality including:
- Connection acceptance and session lifecycle
- Name handshake and chat loop
- Registry of named sessions and broadcast fan-out
- Configuration and utilities
"""
