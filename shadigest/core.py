"""SHA-256 digest computed over byte streams, block by block."""

from __future__ import annotations

import io
import struct
from collections.abc import Iterator, Sequence
from typing import BinaryIO

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
BLOCK_SIZE = 64
LENGTH_OFFSET = BLOCK_SIZE - 8

INITIAL_HASH: tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

ROUND_CONSTANTS: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def rotate_right(value: int, amount: int) -> int:
    """Rotate a 32-bit word right by ``amount`` bits."""
    value &= MASK32
    amount %= 32
    return ((value >> amount) | (value << (32 - amount))) & MASK32


def schedule_sigma0(value: int) -> int:
    """Small sigma 0 used while extending the message schedule."""
    return rotate_right(value, 7) ^ rotate_right(value, 18) ^ ((value & MASK32) >> 3)


def schedule_sigma1(value: int) -> int:
    """Small sigma 1 used while extending the message schedule."""
    return rotate_right(value, 17) ^ rotate_right(value, 19) ^ ((value & MASK32) >> 10)


def hashing_sigma0(value: int) -> int:
    """Big sigma 0 used in the compression rounds."""
    return rotate_right(value, 2) ^ rotate_right(value, 13) ^ rotate_right(value, 22)


def hashing_sigma1(value: int) -> int:
    """Big sigma 1 used in the compression rounds."""
    return rotate_right(value, 6) ^ rotate_right(value, 11) ^ rotate_right(value, 25)


def choose(x: int, y: int, z: int) -> int:
    """Take bits of ``y`` where ``x`` is set, bits of ``z`` elsewhere."""
    return ((x & y) ^ (~x & z)) & MASK32


def majority(x: int, y: int, z: int) -> int:
    """Bitwise majority of three words."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK32


def group_bytes(b0: int, b1: int, b2: int, b3: int) -> int:
    """Join four bytes, most significant first, into one 32-bit word."""
    return ((b0 & 0xFF) << 24) | ((b1 & 0xFF) << 16) | ((b2 & 0xFF) << 8) | (b3 & 0xFF)


def zero_padding(length: int) -> int:
    """Number of zero bytes that follow ``length`` used bytes in a block.

    Up to 56 used bytes the zeros reach the length field; beyond that they
    fill the rest of the block and the length goes into the next one.
    """
    if not 0 <= length <= BLOCK_SIZE:
        raise ValueError(f"block length out of range: {length}")
    if length <= LENGTH_OFFSET:
        return LENGTH_OFFSET - length
    return BLOCK_SIZE - length


def length_suffix(total_bytes: int) -> bytes:
    """The message length in bits as eight big-endian bytes."""
    return ((total_bytes * 8) & MASK64).to_bytes(8, "big")


def message_schedule(words: Sequence[int]) -> list[int]:
    """Extend the 16 words of a block to the 64-word schedule."""
    if len(words) != 16:
        raise ValueError(f"a block holds 16 words, got {len(words)}")
    schedule = [word & MASK32 for word in words]
    for position in range(16, 64):
        schedule.append(
            (
                schedule_sigma1(schedule[position - 2])
                + schedule[position - 7]
                + schedule_sigma0(schedule[position - 15])
                + schedule[position - 16]
            )
            & MASK32
        )
    return schedule


def _read_block(stream: BinaryIO) -> bytes:
    chunks = []
    remaining = BLOCK_SIZE
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def iter_blocks(stream: BinaryIO) -> Iterator[bytes]:
    """Yield the padded 64-byte blocks of everything read from ``stream``."""
    total = 0
    marker_written = False
    while True:
        block = bytearray(_read_block(stream))
        total += len(block)
        if len(block) == BLOCK_SIZE:
            yield bytes(block)
            continue
        if not marker_written:
            block.append(0x80)
            marker_written = True
        block.extend(bytes(zero_padding(len(block))))
        if len(block) == LENGTH_OFFSET:
            block.extend(length_suffix(total))
            yield bytes(block)
            return
        yield bytes(block)


def block_words(block: bytes) -> tuple[int, ...]:
    """Split a 64-byte block into 16 big-endian words."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"a block is {BLOCK_SIZE} bytes, got {len(block)}")
    return struct.unpack(">16I", block)


def compress(state: Sequence[int], words: Sequence[int]) -> tuple[int, ...]:
    """Run the 64 rounds over one block and return the new hash state."""
    if len(state) != 8:
        raise ValueError(f"the hash state holds 8 words, got {len(state)}")
    schedule = message_schedule(words)
    a, b, c, d, e, f, g, h = state
    for constant, word in zip(ROUND_CONSTANTS, schedule):
        t1 = (h + hashing_sigma1(e) + choose(e, f, g) + constant + word) & MASK32
        t2 = (hashing_sigma0(a) + majority(a, b, c)) & MASK32
        a, b, c, d, e, f, g, h = (t1 + t2) & MASK32, a, b, c, (d + t1) & MASK32, e, f, g
    return tuple(
        (old + new) & MASK32 for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


def to_hex(state: Sequence[int]) -> str:
    """Render the hash state as 64 lowercase hexadecimal digits."""
    return "".join(f"{word & MASK32:08x}" for word in state)


def hash_stream(stream: BinaryIO) -> str:
    """Hex SHA-256 digest of everything readable from a binary stream."""
    state = INITIAL_HASH
    for block in iter_blocks(stream):
        state = compress(state, block_words(block))
    return to_hex(state)


def hash_bytes(data: bytes) -> str:
    """Hex SHA-256 digest of a bytes value."""
    return hash_stream(io.BytesIO(bytes(data)))