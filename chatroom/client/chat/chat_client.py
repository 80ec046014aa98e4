"""
Chat client module.

This module handles the client side of the line protocol.
"""

import asyncio
from typing import Optional

from chatroom.common.constants import DEFAULT_HOST, DEFAULT_PORT, CLIENT_MAX_LINE_LENGTH, SENTINEL_TOKEN
from chatroom.common.protocol_definitions import encode_line, decode_line
from chatroom.client.utils.logger import logger


class ChatClient:
    """Client-side chat functionality."""
    
    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, limit: int = CLIENT_MAX_LINE_LENGTH):
        self.host = host
        self.port = port
        self.limit = limit
        self.reader: Optional[asyncio.StreamReader] = None
        self.writer: Optional[asyncio.StreamWriter] = None
    
    async def connect(self):
        """Open the connection. Connection errors propagate."""
        try:
            self.reader, self.writer = await asyncio.open_connection(
                self.host, self.port, limit=self.limit
            )
        except OSError:
            logger.log_connection(self.host, self.port, False)
            raise
        logger.log_connection(self.host, self.port, True)
    
    async def send_line(self, text: str):
        """Send one line to the server."""
        if not self.writer:
            raise ConnectionError("Not connected to server")
        self.writer.write(encode_line(text))
        await self.writer.drain()
    
    async def read_line(self) -> Optional[str]:
        """
        Read the next line from the server, or None once it has closed the connection.
        
        A line longer than the read limit raises ValueError after the buffered
        part of it is dropped; the connection stays usable.
        """
        if not self.reader:
            raise ConnectionError("Not connected to server")
        return decode_line(await self.reader.readline())
    
    async def leave(self):
        """Say goodbye to the room."""
        await self.send_line(SENTINEL_TOKEN)
    
    async def close(self):
        if self.writer:
            self.writer.close()
            try:
                await self.writer.wait_closed()
            except (ConnectionError, OSError) as e:
                logger.debug(f"Error while closing: {e}")
            self.writer = None
            self.reader = None
