# Copyright 2019 Facebook Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Encode binary data as Unicode text, two bytes per code point.

Overview
--------

Base65536 maps every pair of input bytes to a single Unicode code point
taken from a fixed set of large, well-behaved blocks (CJK ideographs,
Yi, Egyptian hieroglyphs, ...).  Each block is 256 code points wide:

    codepoint = block_base[second_byte] | first_byte

so the first byte of a pair is the low 8 bits of the code point and the
second byte picks the block.  That needs 256 blocks.  A 257th block,
U+1500..U+15FF, carries a single trailing byte when the input has odd
length; decoding a code point from it yields one byte instead of two.

The block list is walked once to build two tables (see ``build_tables``):

  - the encode table, byte value -> block base, plus the padding base;
  - the decode table, block base -> byte value, or ``PADDING`` for the
    padding block.

Both tables are immutable and built at import time into ``TABLES``.
``encode_iterable`` and ``decode_iterable`` take them as a parameter,
which defaults to that shared instance.

Text
----

The core transforms work on integers: bytes in, code points out, and
back.  ``encode_text`` / ``decode_text`` convert to and from ``str``.
``encode`` / ``decode`` additionally go through a text encoding, CESU-8
by default, which is what the reference Base65536 implementation emits.
Python has no built-in CESU-8 codec; importing this package registers
one (see ``base65536.cesu8``).

Whitespace is ignored when decoding, so encoded text may be wrapped or
indented freely.

>>> encode_text(b"hello") == "\\u9a68\\ua36c\\u156f"
True
>>> decode_text(encode_text(b"hello"))
b'hello'
"""

import sys
import collections
import logging
import unicodedata
from math import ceil
from types import MappingProxyType
from typing import Iterable, Iterator, Union

from . import cesu8  # registers the cesu-8 codec


__all__ = [
    "Base65536Error",
    "InvalidCodepoint",
    "InvalidEncodedText",
    "BlockTables",
    "RANGES",
    "TABLES",
    "build_tables",
    "encode_iterable",
    "decode_iterable",
    "encode_text",
    "decode_text",
    "encode",
    "decode",
    "encoded_length",
]

__version__ = "1.0.0"

log = logging.getLogger(__name__)


# Block list.  Each (start, end) pair contributes the 256-wide blocks at
# start, start + 0x100, ... while below end.  The first entry is the
# padding block; the other 256 blocks are numbered 0..255 in this order.
RANGES = (
    (0x01500, 0x015FF),  # Padding block
    (0x03400, 0x04CFF),
    (0x04E00, 0x09EFF),
    (0x0A100, 0x0A3FF),
    (0x0A500, 0x0A5FF),
    (0x10600, 0x106FF),
    (0x12000, 0x122FF),
    (0x13000, 0x133FF),
    (0x14400, 0x145FF),
    (0x16800, 0x169FF),
    (0x20000, 0x285FF),
)

BLOCK_SIZE = 0x100
BLOCK_MASK = ~(BLOCK_SIZE - 1)

# Decode-table value for the padding block.
PADDING = -1

MAX_CODEPOINT = 0x10FFFF

NO_BREAK_SPACES = frozenset([0x00A0, 0x2007, 0x202F])
SEPARATOR_CATEGORIES = frozenset(["Zs", "Zl", "Zp"])


class Base65536Error(ValueError):
    """Base class for errors raised while decoding."""


class InvalidCodepoint(Base65536Error):
    """A code point that is neither in a known block nor whitespace.

    ``position`` is the offset of the code point in the decoded stream,
    counting skipped whitespace.
    """

    def __init__(self, codepoint, position=None):
        self.codepoint = codepoint
        self.position = position
        self.name = _codepoint_name(codepoint)
        if 0 <= codepoint:
            msg = "U+%04X %s is not a valid base65536 character" % (
                codepoint,
                self.name,
            )
        else:
            msg = "%d is not a valid base65536 character" % codepoint
        if position is not None:
            msg += " (at position %d)" % position
        super().__init__(msg)


class InvalidEncodedText(Base65536Error):
    """Encoded input could not be transcoded into code points."""


def _codepoint_name(cp):
    if not 0 <= cp <= MAX_CODEPOINT:
        return "<out of range>"
    return unicodedata.name(chr(cp), "<unnamed>")


def _is_whitespace(cp):
    """Java/ICU notion of whitespace: the ASCII controls TAB..CR and
    FS..US, plus space, line and paragraph separators other than the
    no-break spaces.  Narrower than str.isspace(), which also accepts
    U+0085 and the no-break spaces.
    """
    if 0x09 <= cp <= 0x0D or 0x1C <= cp <= 0x1F:
        return True
    if not 0 <= cp <= MAX_CODEPOINT or cp in NO_BREAK_SPACES:
        return False
    return unicodedata.category(chr(cp)) in SEPARATOR_CATEGORIES


# Tables


class BlockTables(
    collections.namedtuple("BlockTables", ["encode", "padding", "decode"])
):
    """Lookup tables for one block layout.

    encode:  tuple of 256 block bases; ``encode[b]`` is the base for a
             pair whose second byte is ``b``.
    padding: base of the padding block, used for a trailing odd byte.
    decode:  read-only mapping from block base to byte value, or to
             ``PADDING`` for the padding block.
    """

    __slots__ = ()

    @property
    def blocks(self):
        """Total number of blocks, padding included."""
        return len(self.encode) + 1


def _walk_blocks(ranges):
    """Yields the base of every block in ``ranges``, in order.

    Raises ValueError if a range does not start on a block boundary, or
    if it overlaps or precedes the range before it.
    """

    last = None
    for start, end in ranges:
        if start & ~BLOCK_MASK:
            raise ValueError("range start U+%04X is not block-aligned" % start)
        if start >= end:
            raise ValueError("empty range U+%04X..U+%04X" % (start, end))
        if last is not None and start <= last:
            raise ValueError(
                "range U+%04X..U+%04X overlaps or precedes U+%04X"
                % (start, end, last)
            )
        for base in range(start, end, BLOCK_SIZE):
            yield base
        last = end


def _build_tables(ranges):
    bases = list(_walk_blocks(ranges))
    if len(bases) != 257:
        raise ValueError("expected 257 blocks, got %d" % len(bases))

    padding, encode = bases[0], tuple(bases[1:])
    decode = {padding: PADDING}
    for index, base in enumerate(encode):
        decode[base] = index

    log.debug(
        "built base65536 tables: %d blocks over %d ranges", len(bases), len(ranges)
    )
    return BlockTables(encode, padding, MappingProxyType(decode))


def build_tables() -> BlockTables:
    """Builds the encode and decode tables from ``RANGES``.

    Every call returns an equal, independent value; ``TABLES`` holds the
    one built at import.

    >>> t = build_tables()
    >>> t.blocks
    257
    >>> hex(t.padding), hex(t.encode[0]), hex(t.encode[255])
    ('0x1500', '0x3400', '0x28500')
    >>> t.decode[0x28500]
    255
    """
    return _build_tables(RANGES)


TABLES = build_tables()


# Encoder


class Pair(collections.namedtuple("Pair", ["low", "high"])):
    __slots__ = ()


class Odd(collections.namedtuple("Odd", ["low"])):
    __slots__ = ()


def _check_octet(b):
    if not 0 <= b <= 255:
        raise ValueError("byte must be in range(0, 256), got %r" % (b,))
    return b


def _chunks(data):
    """Groups ``data`` into Pair(low, high) and a final Odd(low) if needed."""
    it = iter(data)
    for low in it:
        _check_octet(low)
        high = next(it, None)
        if high is None:
            yield Odd(low)
            return
        yield Pair(low, _check_octet(high))


def encode_iterable(
    data: Iterable[int], tables: BlockTables = TABLES
) -> Iterator[int]:
    """Encodes bytes into code points, lazily.

    Consumes ``data`` once, two bytes at a time, and yields one code
    point per pair; a trailing odd byte yields one code point from the
    padding block.

    >>> [hex(cp) for cp in encode_iterable(b"\\x00\\x01\\x02")]
    ['0x3500', '0x1502']
    """
    encode = tables.encode
    padding = tables.padding
    for chunk in _chunks(data):
        if isinstance(chunk, Odd):
            yield padding | chunk.low
        else:
            yield encode[chunk.high] | chunk.low


# Decoder


def decode_iterable(
    codepoints: Iterable[int], tables: BlockTables = TABLES
) -> Iterator[int]:
    """Decodes code points into byte values, lazily.

    Whitespace code points are skipped.  Anything else outside the known
    blocks raises InvalidCodepoint; bytes for the code points before it
    have already been yielded by then.

    >>> bytes(decode_iterable([0x3500, 0x1502]))
    b'\\x00\\x01\\x02'
    """
    decode = tables.decode
    for position, cp in enumerate(codepoints):
        index = decode.get(cp & BLOCK_MASK)
        if index is None:
            if _is_whitespace(cp):
                continue
            raise InvalidCodepoint(cp, position)
        yield cp & 0xFF
        if index != PADDING:
            yield index


# Text wrappers


def encode_text(data: Iterable[int], tables: BlockTables = TABLES) -> str:
    """Encodes bytes into a ``str``."""
    return "".join(map(chr, encode_iterable(data, tables)))


def decode_text(text: str, tables: BlockTables = TABLES) -> bytes:
    """Decodes a ``str`` produced by encode_text()."""
    return bytes(decode_iterable(map(ord, text), tables))


def encode(data: Iterable[int], encoding: str = "cesu-8") -> bytes:
    """Encodes bytes into Base65536 text in the given text encoding.

    The default, CESU-8, writes code points above U+FFFF as two 3-byte
    surrogate sequences.  Pass "utf-8" for the shorter standard form.
    Raises LookupError if the encoding is unknown.
    """
    return encode_text(data).encode(encoding)


def decode(data: Union[bytes, str], encoding: str = "cesu-8") -> bytes:
    """Decodes Base65536 text back into bytes.

    ``data`` is either encoded text in ``encoding``, or an already
    decoded ``str``, in which case ``encoding`` is ignored.

    Raises InvalidEncodedText if ``data`` is not valid in ``encoding``,
    and InvalidCodepoint if it contains a character outside the
    Base65536 alphabet other than whitespace.
    """
    if not isinstance(data, str):
        try:
            data = bytes(data).decode(encoding)
        except UnicodeDecodeError as e:
            raise InvalidEncodedText(
                "input is not valid %s: %s" % (encoding, e.reason)
            ) from e
    return decode_text(data)


def encoded_length(n: int) -> int:
    """Number of code points encode_iterable() yields for ``n`` bytes."""
    return ceil(n / 2)


if __name__ == "__main__":
    import doctest

    sys.exit(doctest.testmod().failed)
