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
CESU-8 text codec.

CESU-8 is UTF-8 applied to UTF-16 code units: a code point above U+FFFF
is first split into a surrogate pair, and each surrogate is written as
its own 3-byte sequence.  Everything in the BMP is identical to UTF-8.

Importing this module registers the codec, so that

    "\\U00020000".encode("cesu-8") == b"\\xed\\xa1\\x80\\xed\\xb0\\x80"

works like any other encoding.
"""

import codecs

__all__ = [
    "encode",
    "decode",
]

NAME = "cesu-8"
ALIASES = ("cesu-8", "cesu8", "cesu_8")


def _utf16_units(text):
    for c in text:
        cp = ord(c)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield chr(0xD800 | (cp >> 10))
            yield chr(0xDC00 | (cp & 0x3FF))
        else:
            yield c


def _sequence_length(lead):
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _complete_prefix(data):
    """Length of the part of ``data`` that can be decoded without
    waiting for more input.

    Holds back a trailing incomplete sequence, and a trailing high
    surrogate, whose low half may still be on its way.
    """
    end = len(data)
    i = end - 1
    while i >= 0 and end - i <= 3 and 0x80 <= data[i] <= 0xBF:
        i -= 1
    if i >= 0 and data[i] >= 0xC0 and i + _sequence_length(data[i]) > end:
        end = i
    if end >= 3 and data[end - 3] == 0xED and 0xA0 <= data[end - 2] <= 0xAF:
        end -= 3
    return end


def _scan(data, pos, end):
    """Decodes data[pos:end] up to the first error.

    Returns (text, stop, error); error is None if everything decoded.
    """
    error = None
    try:
        text = data[pos:end].decode("utf-8", "surrogatepass")
        stop = end
    except UnicodeDecodeError as e:
        stop = pos + e.start
        error = UnicodeDecodeError(NAME, data, stop, pos + e.end, e.reason)
        text = data[pos:stop].decode("utf-8", "surrogatepass")
    if text and max(text) > "\uffff":
        i = next(i for i, c in enumerate(text) if c > "\uffff")
        text = text[:i]
        stop = pos + len(text.encode("utf-8", "surrogatepass"))
        error = UnicodeDecodeError(
            NAME, data, stop, stop + 4, "4-byte sequence not allowed in CESU-8"
        )
    return text, stop, error


def _decode(data, errors, final):
    data = bytes(data)
    end = len(data) if final else _complete_prefix(data)
    parts = []
    pos = 0
    while pos < end:
        text, pos, error = _scan(data, pos, end)
        parts.append(text)
        if error is None:
            break
        # The strict handler raises; the others give a replacement and
        # the offset to resume from.
        replacement, pos = codecs.lookup_error(errors)(error)
        parts.append(replacement)
    text = "".join(parts).encode("utf-16-le", "surrogatepass")
    return text.decode("utf-16-le", "surrogatepass"), end


def encode(text, errors="strict"):
    """Encodes ``text`` to CESU-8.  Returns (bytes, characters consumed).

    Every ``str`` is encodable, lone surrogates included, so ``errors``
    is never consulted.

    >>> encode("a\\u1500\\U00020000")
    (b'a\\xe1\\x94\\x80\\xed\\xa1\\x80\\xed\\xb0\\x80', 3)
    """
    data = "".join(_utf16_units(text)).encode("utf-8", "surrogatepass")
    return data, len(text)


def decode(data, errors="strict"):
    """Decodes CESU-8 ``data``.  Returns (str, bytes consumed).

    Surrogate pairs are joined back into single code points.  A lone
    surrogate is passed through as is.  Malformed sequences, including
    4-byte UTF-8 sequences, which CESU-8 never contains, go to the
    ``errors`` handler; the default raises UnicodeDecodeError.

    >>> decode(b"a\\xed\\xa1\\x80\\xed\\xb0\\x80") == ("a\\U00020000", 7)
    True
    >>> decode(b"a\\xffb", "replace") == ("a\\ufffdb", 3)
    True
    """
    return _decode(data, errors, True)


class Codec(codecs.Codec):
    def encode(self, input, errors="strict"):
        return encode(input, errors)

    def decode(self, input, errors="strict"):
        return decode(input, errors)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):
        return encode(input, self.errors)[0]


class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    def _buffer_decode(self, input, errors, final):
        return _decode(input, errors, final)


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    def decode(self, input, errors="strict"):
        return _decode(input, errors, False)


def _search(name):
    if name in ALIASES:
        return codecs.CodecInfo(
            name=NAME,
            encode=encode,
            decode=decode,
            incrementalencoder=IncrementalEncoder,
            incrementaldecoder=IncrementalDecoder,
            streamreader=StreamReader,
            streamwriter=StreamWriter,
        )
    return None


codecs.register(_search)
