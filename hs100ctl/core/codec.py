"""Wire codec for the smart plug protocol.

Both directions use the same layout: a 4-byte big-endian length of the plaintext
followed by the plaintext run through an autokey XOR cipher seeded with 0xAB.
"""

from __future__ import annotations

import json
import struct
from typing import Any

from hs100ctl.core.errors import DecodeError
from hs100ctl.core.model import Command

INITIAL_KEY = 0xAB
HEADER_SIZE = 4
_HEADER = struct.Struct(">I")


def encode(plaintext: bytes) -> bytes:
    key = INITIAL_KEY
    out = bytearray(len(plaintext))
    for i, byte in enumerate(plaintext):
        key = byte ^ key
        out[i] = key
    return bytes(out)


def decode(ciphertext: bytes) -> bytes:
    key = INITIAL_KEY
    out = bytearray(len(ciphertext))
    for i, byte in enumerate(ciphertext):
        out[i] = byte ^ key
        key = byte
    return bytes(out)


def frame(payload: bytes) -> bytes:
    return _HEADER.pack(len(payload)) + payload


def unframe(reply: bytes) -> bytes:
    # The length header is not trusted; replies are resynchronized by repair().
    return reply[HEADER_SIZE:]


def repair(text: str) -> str:
    """Drop stale trailing bytes after the last closing brace."""
    end = text.rfind("}")
    if end == -1:
        return text
    return text[: end + 1]


def build_request(command: Command) -> bytes:
    return frame(encode(command.request.encode("utf-8")))


def decode_reply(reply: bytes) -> dict[str, Any]:
    body = unframe(reply)
    if not body:
        raise DecodeError("Empty reply from device")

    text = repair(decode(body).decode("utf-8", errors="replace"))
    try:
        loaded = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Malformed JSON in device reply: {exc}") from exc

    if not isinstance(loaded, dict):
        raise DecodeError("Device reply must contain a JSON object at root")
    return loaded
