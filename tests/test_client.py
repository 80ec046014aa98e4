#!/usr/bin/env python3
"""
Unit tests for the console client in chatroom.client.main_client

Covers:
- Printing server lines and skipping ones over the read limit
- Forwarding stdin lines to the room
- Saying GOODBYE when stdin runs out
"""

import asyncio
import io
import unittest
from unittest.mock import patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chatroom.client.chat.chat_client import ChatClient
from chatroom.client.main_client import listen_for_messages, interactive_mode
from chatroom.server.main_server import ChatroomServer
from tests.fakes import redirect_session_log

TIMEOUT = 5


class TestListenForMessages(unittest.IsolatedAsyncioTestCase):
    """Test the printer loop against a scripted stream."""
    
    async def test_prints_lines_until_server_closes(self):
        client = ChatClient()
        client.reader = asyncio.StreamReader()
        client.reader.feed_data(b"Alice: hi\nBob: hello\n")
        client.reader.feed_eof()
        output = io.StringIO()
        
        with patch('sys.stdout', output):
            await asyncio.wait_for(listen_for_messages(client), TIMEOUT)
        
        self.assertEqual(output.getvalue(), "Alice: hi\nBob: hello\n")
    
    async def test_overlong_line_is_skipped(self):
        client = ChatClient(limit=16)
        client.reader = asyncio.StreamReader(limit=16)
        client.reader.feed_data(b"x" * 40 + b"\nshort\n")
        client.reader.feed_eof()
        output = io.StringIO()
        
        with patch('sys.stdout', output):
            await asyncio.wait_for(listen_for_messages(client), TIMEOUT)
        
        self.assertEqual(output.getvalue(), "short\n")


class TestInteractiveMode(unittest.IsolatedAsyncioTestCase):
    """Run the console client against a loopback server."""
    
    async def asyncSetUp(self):
        redirect_session_log(self)
        self.server = ChatroomServer(host='127.0.0.1', port=0)
        await self.server.start()
        self.port = self.server.get_port()
        self.serve_task = asyncio.create_task(self.server.serve())
        
        self.bob = ChatClient('127.0.0.1', self.port)
        await self.bob.connect()
        await self.read(self.bob)
        await self.bob.send_line("Bob")
        await self.read(self.bob)
    
    async def asyncTearDown(self):
        await self.bob.close()
        
        async def drained():
            while self.server.chat_server.population:
                await asyncio.sleep(0.01)
        await asyncio.wait_for(drained(), TIMEOUT)
        
        self.serve_task.cancel()
        try:
            await self.serve_task
        except asyncio.CancelledError:
            pass
    
    async def read(self, client):
        return await asyncio.wait_for(client.read_line(), TIMEOUT)
    
    async def test_typed_lines_reach_room_and_eof_says_goodbye(self):
        output = io.StringIO()
        
        with patch('sys.stdin', io.StringIO("Alice\nhello everyone\r\n")), patch('sys.stdout', output):
            await asyncio.wait_for(interactive_mode(ChatClient('127.0.0.1', self.port)), TIMEOUT)
        
        self.assertEqual(await self.read(self.bob), "Alice: hello everyone")
        self.assertEqual(await self.read(self.bob), "Alice has left the group!")
        
        printed = output.getvalue().splitlines()
        self.assertEqual(printed, [
            "Welcome to the chatroom! There are currently 2 people including you in the room! "
            "Please enter your name: ",
            "Welcome Alice! Start typing below to send messages to your friends.",
        ])
        self.assertEqual(self.server.chat_server.registered_count(), 1)


if __name__ == '__main__':
    unittest.main()
