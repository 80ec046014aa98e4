#!/usr/bin/env python3
"""
Chatroom Client - Main Entry Point

Prints every line the server sends and forwards every line typed on
stdin. End of input sends GOODBYE.

Usage:
    python main_client.py [--host HOST] [--port PORT]
"""

import argparse
import asyncio
import sys

from chatroom.common.constants import DEFAULT_HOST, DEFAULT_PORT
from chatroom.client.chat.chat_client import ChatClient
from chatroom.client.utils.logger import logger


async def listen_for_messages(client: ChatClient):
    """Print server lines until the server closes the connection."""
    while True:
        try:
            line = await client.read_line()
        except ValueError as e:
            logger.error(f"Skipped a line from the server: {e}")
            continue
        if line is None:
            logger.info("Server closed connection")
            return
        print(line, flush=True)


async def interactive_mode(client: ChatClient):
    """Run the client with console input."""
    await client.connect()
    listener_task = asyncio.create_task(listen_for_messages(client))
    loop = asyncio.get_running_loop()
    
    try:
        while not listener_task.done():
            user_input = await loop.run_in_executor(None, sys.stdin.readline)
            if listener_task.done():
                break
            if not user_input:
                await client.leave()
                break
            await client.send_line(user_input.rstrip('\r\n'))
        await listener_task
    finally:
        listener_task.cancel()
        try:
            await listener_task
        except asyncio.CancelledError:
            pass
        await client.close()
        logger.info("Disconnected from server")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Chatroom Client')
    parser.add_argument('--host', type=str, default=DEFAULT_HOST,
                       help=f'Server address (default: {DEFAULT_HOST})')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT,
                       help=f'Server port (default: {DEFAULT_PORT})')
    
    args = parser.parse_args(argv)
    
    try:
        asyncio.run(interactive_mode(ChatClient(args.host, args.port)))
    except KeyboardInterrupt:
        print("\n[INFO] Interrupted by user")
    except (ConnectionError, OSError) as e:
        logger.log_error("client", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
