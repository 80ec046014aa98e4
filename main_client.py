#!/usr/bin/env python3
"""
Chatroom Client - Main Entry Point

Usage:
    python main_client.py [--host HOST] [--port PORT]
"""

import sys

if __name__ == "__main__":
    from chatroom.client.main_client import main
    
    sys.exit(main())
