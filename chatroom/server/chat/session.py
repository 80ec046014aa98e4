"""
Session module.

One Session per accepted connection. A session walks through

    CONNECTED -> NAMING -> ACTIVE -> CLOSED

one step at a time: greet, collect a non-empty name, then relay lines
until the client says goodbye or the stream ends.
"""

import asyncio
from enum import Enum
from typing import Optional

from chatroom.common.protocol_definitions import (
    create_welcome_message, create_retry_message, create_instruction_message,
    is_sentinel, encode_line, decode_line
)
from chatroom.server.utils.logger import logger


class SessionState(Enum):
    CONNECTED = 'connected'
    NAMING = 'naming'
    ACTIVE = 'active'
    CLOSED = 'closed'


# Failures that end one session without touching the rest of the room.
# ValueError is what StreamReader.readline raises for an over-long line.
STREAM_ERRORS = (ConnectionError, OSError, asyncio.IncompleteReadError, ValueError)


class Session:
    """A connected client: its streams, its name and where it is in the handshake."""
    
    def __init__(self, sid: int, reader: asyncio.StreamReader, writer: asyncio.StreamWriter, chat_server):
        self.sid = sid
        self.reader = reader
        self.writer = writer
        self.chat_server = chat_server
        self.addr = writer.get_extra_info('peername')
        
        self.state = SessionState.CONNECTED
        self.name: Optional[str] = None
        self.population = 0  # room size when this session was admitted
        
        # Set by ChatServer under its lock
        self.admitted = False
        self.released = False
    
    def __repr__(self):
        return f"Session(sid={self.sid}, name={self.name!r}, state={self.state.value})"
    
    async def run(self):
        """
        Drive the session until it is CLOSED.
        
        Stream failures are logged and close the session; they never reach
        the caller or any other client.
        """
        try:
            while self.state is not SessionState.CLOSED:
                await self.step()
        except STREAM_ERRORS as e:
            logger.log_error(f"session sid={self.sid}", e)
            self.state = SessionState.CLOSED
    
    async def step(self):
        """Perform a single transition from the current state."""
        if self.state is SessionState.CONNECTED:
            await self._greet()
        elif self.state is SessionState.NAMING:
            await self._read_name()
        elif self.state is SessionState.ACTIVE:
            await self._read_message()
    
    async def close(self):
        """Run teardown; repeated calls are no-ops."""
        self.state = SessionState.CLOSED
        await self.chat_server.release(self)
    
    async def send_line(self, text: str):
        """Send one line straight to this client."""
        self.writer.write(encode_line(text))
        await self.writer.drain()
    
    async def read_line(self) -> Optional[str]:
        """Read one line from this client, or None at end of stream."""
        data = await self.reader.readline()
        return decode_line(data)
    
    async def _greet(self):
        await self.send_line(create_welcome_message(self.population))
        self.state = SessionState.NAMING
    
    async def _read_name(self):
        line = await self.read_line()
        if line is None:
            # Never registered, so nobody needs to hear about it
            self.state = SessionState.CLOSED
        elif line == '':
            await self.send_line(create_retry_message())
        else:
            self.name = line
            await self.chat_server.register(self, line)
            await self.send_line(create_instruction_message(line))
            self.state = SessionState.ACTIVE
    
    async def _read_message(self):
        line = await self.read_line()
        if line is None:
            # Dropped connection: no departure notice, only a goodbye gets one
            self.state = SessionState.CLOSED
        elif is_sentinel(line):
            await self.chat_server.depart(self)
            self.state = SessionState.CLOSED
        else:
            logger.log_chat(self.name, self.sid, line)
            await self.chat_server.broadcast(line, self)
