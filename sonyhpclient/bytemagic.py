"""Byte-order and MAC address helpers."""

from __future__ import annotations

import re

from .constants import MAC_ADDR_STR_SIZE

MAC_ADDR_BYTES_LEN = 6

_HEX_RUN = re.compile(r"\s*([0-9A-Fa-f]+)")


def byte_order_swap(num: int) -> int:
    """Reverse the byte order of a 32-bit unsigned integer."""
    return int.from_bytes((num & 0xFFFFFFFF).to_bytes(4, "big"), "little")


def bytes_to_int_be(buf: bytes) -> int:
    """Read a signed 32-bit big-endian integer from the first four bytes."""
    if len(buf) < 4:
        raise ValueError(f"Need 4 bytes, got {len(buf)}")
    return int.from_bytes(bytes(buf[:4]), "big", signed=True)


def int_to_bytes_be(num: int) -> bytes:
    """Encode a 32-bit unsigned integer as four big-endian bytes."""
    return (num & 0xFFFFFFFF).to_bytes(4, "big")


def mac_string_to_long(text: str) -> int:
    """Parse a MAC address such as ``00:11:22:33:44:55`` into an integer."""
    if len(text) != MAC_ADDR_STR_SIZE:
        raise ValueError(
            f"Invalid MAC address size ({text}): {len(text)} != {MAC_ADDR_STR_SIZE}"
        )
    result = 0
    pos = 0
    while pos < len(text):
        match = _HEX_RUN.match(text, pos)
        if match is None:
            break
        result = ((result << 8) + int(match.group(1), 16)) & 0xFFFFFFFFFFFFFFFF
        pos = match.end()
        if pos < len(text):
            if text[pos] not in "-:":
                raise ValueError(f"Invalid MAC address format: {text}")
            pos += 1
    return result


def mac_bytes_to_string(addr: bytes) -> str:
    """Format six little-endian address bytes as a colon separated MAC string."""
    if len(addr) < MAC_ADDR_BYTES_LEN:
        raise ValueError(f"Need {MAC_ADDR_BYTES_LEN} address bytes, got {len(addr)}")
    return ":".join(f"{b:02x}" for b in reversed(bytes(addr[:MAC_ADDR_BYTES_LEN])))