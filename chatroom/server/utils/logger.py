"""
Server logging module.

This module handles server-side logging functionality.
"""

import logging
from datetime import datetime
from pathlib import Path

from chatroom.common.constants import LOG_DIR, SESSION_LOG_FILE


class ServerLogger:
    """Server logging class."""
    
    def __init__(self, logs_dir: str = LOG_DIR, log_level: int = logging.INFO):
        self.logs_dir = Path(logs_dir)
        
        # Set up main logger
        self.logger = logging.getLogger('chatroom_server')
        self.logger.setLevel(log_level)
        
        # Remove existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
        
        # Create console handler
        self.console_handler = logging.StreamHandler()
        self.console_handler.setLevel(log_level)
        
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.console_handler.setFormatter(formatter)
        self.logger.addHandler(self.console_handler)
        
        self.session_log_path = self.logs_dir / SESSION_LOG_FILE
    
    def configure(self, log_level=None, logs_dir: str = None):
        """Change the level or the event log directory at startup."""
        if log_level is not None:
            self.logger.setLevel(log_level)
            self.console_handler.setLevel(log_level)
        if logs_dir is not None:
            self.logs_dir = Path(logs_dir)
            self.session_log_path = self.logs_dir / SESSION_LOG_FILE
    
    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)
    
    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)
    
    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)
    
    def log_listening(self, addr: str):
        self.info(f"Chatroom open! Listening on {addr}")
    
    def log_connection(self, addr: tuple, sid: int):
        """Log client connection."""
        self.info(f"New connection from {addr}, assigned sid={sid}")
    
    def log_join(self, name: str, sid: int):
        """Log a completed name handshake."""
        self.info(f"'{name}' joined the room (sid={sid})")
        self._write_to_file(self.session_log_path, f"{datetime.now().isoformat()} | JOIN | {name} (sid={sid})")
    
    def log_chat(self, name: str, sid: int, message: str):
        """Log chat message."""
        self.debug(f"Chat from {name} (sid={sid}): {message}")
    
    def log_departure(self, name: str, sid: int):
        """Log a voluntary goodbye."""
        self.info(f"'{name}' said goodbye (sid={sid})")
        self._write_to_file(self.session_log_path, f"{datetime.now().isoformat()} | GOODBYE | {name} (sid={sid})")
    
    def log_abandoned(self, sid: int):
        """Log a connection that left before naming itself."""
        self.info(f"Connection sid={sid} closed before choosing a name")
    
    def log_disconnect(self, name: str, sid: int):
        """Log user disconnect."""
        self.info(f"User {name} (sid={sid}) disconnected")
        self._write_to_file(self.session_log_path, f"{datetime.now().isoformat()} | DISCONNECT | {name} (sid={sid})")
    
    def log_delivery_failure(self, sid: int, error: Exception):
        self.error(f"Failed to deliver to sid={sid}: {error}")
    
    def log_error(self, operation: str, error: Exception):
        """Log error with operation context."""
        self.error(f"Error in {operation}: {error}")
    
    def _write_to_file(self, file_path: Path, content: str):
        """Write content to log file."""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'a', encoding='utf-8') as f:
                f.write(content + '\n')
        except OSError as e:
            self.error(f"Failed to write to log file {file_path}: {e}")


# Global logger instance
logger = ServerLogger()
