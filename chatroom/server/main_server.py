#!/usr/bin/env python3
"""
Chatroom Server - Main Entry Point

Accepts connections and runs one Session per client, making sure every
session is torn down exactly once however it ends.
"""

import argparse
import asyncio
import sys

from chatroom.common.constants import DEFAULT_SERVER_HOST, DEFAULT_PORT
from chatroom.server.chat.chat_server import ChatServer
from chatroom.server.chat.session import Session
from chatroom.server.utils.config import ServerConfig
from chatroom.server.utils.logger import logger


class ChatroomServer:
    """Main server class: the accept loop and session lifecycle."""
    
    def __init__(self, host: str = DEFAULT_SERVER_HOST, port: int = DEFAULT_PORT):
        self.config = ServerConfig(host, port)
        self.chat_server = ChatServer()
        self.server = None
    
    async def handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        """Handle individual client connection."""
        session = Session(self.chat_server.get_next_sid(), reader, writer, self.chat_server)
        logger.log_connection(session.addr, session.sid)
        
        try:
            session.population = await self.chat_server.admit(session)
            await session.run()
        except asyncio.CancelledError:
            logger.info(f"Connection cancelled for sid={session.sid}")
            raise
        except Exception as e:
            logger.error(f"Unexpected error for sid={session.sid}: {e}")
        finally:
            await session.close()
    
    async def start(self):
        """Bind the listener. Bind errors propagate."""
        self.server = await asyncio.start_server(
            self.handle_client,
            self.config.host,
            self.config.port,
            limit=self.config.max_line_length
        )
        
        addr = ', '.join(str(sock.getsockname()) for sock in self.server.sockets)
        logger.log_listening(addr)
        return self.server
    
    async def serve(self):
        """Accept connections forever."""
        if self.server is None:
            await self.start()
        
        async with self.server:
            await self.server.serve_forever()
    
    def get_port(self) -> int:
        """Port actually bound, useful when configured with port 0."""
        return self.server.sockets[0].getsockname()[1]


def main(argv=None):
    parser = argparse.ArgumentParser(description='Chatroom Server')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT,
                       help=f'TCP port to listen on (default: {DEFAULT_PORT})')
    
    args = parser.parse_args(argv)
    
    try:
        server = ChatroomServer(port=args.port)
    except ValueError as e:
        parser.error(str(e))
    
    logger.configure(**server.config.get_log_settings())
    logger.debug(f"Configuration: {server.config.get_connection_info()}")
    
    try:
        asyncio.run(server.serve())
    except KeyboardInterrupt:
        logger.info("Server shutting down...")
    except OSError as e:
        logger.log_error("server", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
