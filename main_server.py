#!/usr/bin/env python3
"""
Chatroom Server - Main Entry Point

Usage:
    python main_server.py [--port PORT]

Optional arguments:
    --port PORT           TCP port to listen on (default: 13000)
"""

import sys

if __name__ == "__main__":
    from chatroom.server.main_server import main
    
    sys.exit(main())
