"""
Definitions shared by the chatroom server and client.
"""
