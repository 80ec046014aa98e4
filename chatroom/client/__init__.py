"""
Client package for the chatroom.

A plain line client: connect, print what the room says, send what you type.
"""
