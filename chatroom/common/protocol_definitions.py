"""
Protocol definitions for the chatroom.

This module defines every line the server sends and how lines are moved
on and off the wire. All messages are newline-terminated text.
"""

from typing import Optional

from chatroom.common.constants import (
    ENCODING, LINE_TERMINATOR, SENTINEL_TOKEN, THE_LONELIEST_NUMBER
)


def create_welcome_message(population: int) -> str:
    """Create the greeting sent on connect, phrased for the room size."""
    if population == THE_LONELIEST_NUMBER:
        is_or_are, person_or_people = 'is', 'person'
    else:
        is_or_are, person_or_people = 'are', 'people'
    return (f"Welcome to the chatroom! There {is_or_are} currently {population} "
            f"{person_or_people} including you in the room! Please enter your name: ")


def create_retry_message() -> str:
    """Create the re-prompt sent after an empty name."""
    return "Sorry, didn't catch that. Please enter your name: "


def create_instruction_message(name: str) -> str:
    """Create the instructions sent once a name is accepted."""
    return f"Welcome {name}! Start typing below to send messages to your friends."


def create_chat_message(name: str, text: str) -> str:
    """Create a relayed chat line."""
    return f"{name}: {text}"


def create_departure_message(name: str) -> str:
    """Create the notice sent to the room when someone says goodbye."""
    return f"{name} has left the group!"


def is_sentinel(line: str) -> bool:
    """Check whether a client line is the exit token."""
    return line == SENTINEL_TOKEN


def encode_line(text: str) -> bytes:
    """Encode a line of text for the wire, adding the terminator."""
    return (text + LINE_TERMINATOR).encode(ENCODING)


def decode_line(data: bytes) -> Optional[str]:
    """
    Decode one line read from the wire.

    Returns None for end of stream (no bytes). A trailing newline and an
    optional carriage return before it are stripped; an unterminated
    final line is returned as-is.
    """
    if not data:
        return None
    text = data.decode(ENCODING, errors='replace')
    if text.endswith('\n'):
        text = text[:-1]
        if text.endswith('\r'):
            text = text[:-1]
    return text
