"""
Shared constants for the chatroom server and client.

This module contains all constants used across client and server components.
"""

# Network Configuration
DEFAULT_HOST = 'localhost'
DEFAULT_SERVER_HOST = '0.0.0.0'
DEFAULT_PORT = 13000
MIN_PORT = 0
MAX_PORT = 65535

# Wire format
ENCODING = 'utf-8'
LINE_TERMINATOR = '\n'
MAX_LINE_LENGTH = 64 * 1024  # StreamReader limit per line
# Relayed lines carry a name and a message, each up to MAX_LINE_LENGTH
CLIENT_MAX_LINE_LENGTH = 2 * MAX_LINE_LENGTH + 256

# Room
SENTINEL_TOKEN = 'GOODBYE'
THE_LONELIEST_NUMBER = 1

# Logging
LOG_DIR = 'logs'
LOG_LEVEL = 'INFO'
SESSION_LOG_FILE = 'sessions.log'
