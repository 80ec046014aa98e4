"""
Server configuration module.

This module handles server-side configuration settings.
"""

from chatroom.common.constants import (
    DEFAULT_SERVER_HOST, DEFAULT_PORT, MIN_PORT, MAX_PORT, MAX_LINE_LENGTH, LOG_DIR, LOG_LEVEL
)


class ServerConfig:
    """Server configuration class."""
    
    def __init__(self, host: str = DEFAULT_SERVER_HOST, port: int = DEFAULT_PORT, logs_dir: str = LOG_DIR):
        if not isinstance(port, int) or not MIN_PORT <= port <= MAX_PORT:
            raise ValueError(f"Port must be between {MIN_PORT} and {MAX_PORT}, got {port!r}")
        self.host = host
        self.port = port
        
        # Logging configuration
        self.logs_dir = logs_dir
        self.log_level = LOG_LEVEL
        
        # Connection settings
        self.max_line_length = MAX_LINE_LENGTH
    
    def get_connection_info(self):
        """Get connection information."""
        return {
            'host': self.host,
            'port': self.port
        }
    
    def get_log_settings(self):
        """Get logging settings."""
        return {
            'logs_dir': self.logs_dir,
            'log_level': self.log_level
        }
