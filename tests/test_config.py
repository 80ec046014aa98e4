#!/usr/bin/env python3
"""
Unit tests for chatroom.server.utils.config
"""

import logging
import unittest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chatroom.server.utils.config import ServerConfig
from chatroom.server.utils.logger import logger
from tests.fakes import redirect_session_log


class TestServerConfig(unittest.TestCase):
    
    def test_defaults(self):
        config = ServerConfig()
        self.assertEqual(config.get_connection_info(), {'host': '0.0.0.0', 'port': 13000})
        self.assertEqual(config.get_log_settings(), {'logs_dir': 'logs', 'log_level': 'INFO'})
    
    def test_port_bounds_accepted(self):
        self.assertEqual(ServerConfig(port=0).port, 0)
        self.assertEqual(ServerConfig(port=65535).port, 65535)
    
    def test_port_out_of_range_rejected(self):
        with self.assertRaises(ValueError):
            ServerConfig(port=-1)
        with self.assertRaises(ValueError):
            ServerConfig(port=65536)
    
    def test_non_integer_port_rejected(self):
        with self.assertRaises(ValueError):
            ServerConfig(port="13000")
    
    def test_log_settings_configure_logger(self):
        redirect_session_log(self)
        config = ServerConfig(logs_dir='chat_logs')
        
        logger.configure(**config.get_log_settings())
        
        self.assertEqual(logger.session_log_path, Path('chat_logs') / 'sessions.log')
        self.assertEqual(logger.logger.level, logging.INFO)
        self.assertEqual(logger.console_handler.level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
