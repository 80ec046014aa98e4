"""
Chat server module.

This module owns the shared room state: the registry of named sessions,
the population counter and the broadcast lock that serializes them.
"""

import asyncio
from typing import List

from chatroom.common.protocol_definitions import (
    create_chat_message, create_departure_message, encode_line
)
from chatroom.server.chat.registry import Registry
from chatroom.server.utils.logger import logger


class ChatServer:
    """Server-side room state and broadcast fan-out."""
    
    def __init__(self):
        self.registry = Registry()
        self.population = 0  # accepted and not yet torn down
        self.next_sid = 1
        self.lock = asyncio.Lock()  # the broadcast lock
    
    def get_next_sid(self) -> int:
        """Get the next session id."""
        sid = self.next_sid
        self.next_sid += 1
        return sid
    
    async def admit(self, session) -> int:
        """Count a newly accepted connection and return the room size including it."""
        async with self.lock:
            self.population += 1
            session.admitted = True
            return self.population
    
    async def register(self, session, name: str):
        """Record a completed handshake."""
        async with self.lock:
            self.registry.insert(session, name)
        logger.log_join(name, session.sid)
    
    async def broadcast(self, text: str, sender) -> List[object]:
        """
        Send a chat line from sender to everyone else in the room.
        
        Returns the sessions whose delivery failed. They stay registered;
        their own read loop notices the broken connection.
        """
        async with self.lock:
            name = self.registry.lookup_name(sender)
            return await self._fan_out(create_chat_message(name, text), sender)
    
    async def depart(self, sender) -> List[object]:
        """
        Announce a goodbye and drop the sender from the registry.
        
        Both happen under one hold of the lock, so no later broadcast can
        still see the departed session.
        """
        async with self.lock:
            name = self.registry.lookup_name(sender)
            failed = await self._fan_out(create_departure_message(name), sender)
            self.registry.remove(sender)
        logger.log_departure(name, sender.sid)
        return failed
    
    async def release(self, session):
        """
        Tear a session down: unregister it, close its connection and
        decrement the population. Safe to call more than once.
        """
        async with self.lock:
            if session.released:
                return
            session.released = True
            self.registry.remove(session)
            if session.admitted:
                self.population -= 1
        
        if session.name is None:
            logger.log_abandoned(session.sid)
        else:
            logger.log_disconnect(session.name, session.sid)
        
        writer = session.writer
        try:
            writer.close()
            await writer.wait_closed()
        except (ConnectionError, OSError) as e:
            logger.debug(f"Error closing sid={session.sid}: {e}")
    
    def registered_count(self) -> int:
        """Get the number of named sessions."""
        return len(self.registry)
    
    async def _fan_out(self, line: str, sender) -> List[object]:
        # Caller holds self.lock.
        data = encode_line(line)
        failed = []
        for recipient in self.registry.snapshot_excluding(sender):
            try:
                recipient.writer.write(data)
                await recipient.writer.drain()
            except (ConnectionError, OSError) as e:
                logger.log_delivery_failure(recipient.sid, e)
                failed.append(recipient)
        return failed
