import codecs
import doctest
import io
import math
import random
import subprocess
import sys
import unicodedata

import pytest

import base65536
from base65536 import (
    PADDING,
    RANGES,
    TABLES,
    Base65536Error,
    BlockTables,
    InvalidCodepoint,
    InvalidEncodedText,
    build_tables,
    decode,
    decode_iterable,
    decode_text,
    encode,
    encode_iterable,
    encode_text,
    encoded_length,
    Odd,
    Pair,
    _build_tables,
    _chunks,
    _walk_blocks,
)
from base65536 import cesu8
from base65536.__main__ import wrap_text
from base65536.ucdxml import audit_blocks, load_ucdxml, ucdxml_get_repertoire


KNOWN = [
    (b"\x00", 0x1500),
    (b"\x01", 0x1501),
    (b"\xfe", 0x15FE),
    (b"\xff", 0x15FF),
    (b"\x00\x00", 0x3400),
    (b"\x01\x00", 0x3401),
    (b"\x00\x01", 0x3500),
    (b"\xfe\xff", 0x285FE),
    (b"\xff\xff", 0x285FF),
]


def decode_iterable_list(codepoints):
    return list(decode_iterable(codepoints))


def _random_bytes(rng, n):
    return bytes(rng.getrandbits(8) for _ in range(n))


# ── Tables ─────────────────────────────────────────────────────────


class TestTables:
    def test_block_count(self):
        assert TABLES.blocks == 257
        assert len(TABLES.encode) == 256
        assert len(TABLES.decode) == 257

    def test_padding_block(self):
        assert TABLES.padding == 0x1500
        assert TABLES.decode[0x1500] == PADDING

    def test_first_and_last(self):
        assert TABLES.encode[0] == 0x3400
        assert TABLES.encode[24] == 0x4C00
        assert TABLES.encode[25] == 0x4E00
        assert TABLES.encode[255] == 0x28500

    def test_bijection(self):
        for index, base in enumerate(TABLES.encode):
            assert TABLES.decode[base] == index
        for base, index in TABLES.decode.items():
            if index == PADDING:
                assert base == TABLES.padding
            else:
                assert TABLES.encode[index] == base

    def test_bases_aligned(self):
        for base in TABLES.decode:
            assert base & 0xFF == 0

    def test_no_duplicates(self):
        assert len(set(TABLES.encode)) == 256
        assert TABLES.padding not in TABLES.encode

    def test_bases_within_ranges(self):
        for base in TABLES.decode:
            assert any(start <= base < end for start, end in RANGES)

    def test_build_is_repeatable(self):
        a = build_tables()
        b = build_tables()
        assert a == b == TABLES
        assert isinstance(a, BlockTables)

    def test_decode_read_only(self):
        with pytest.raises(TypeError):
            TABLES.decode[0x4100] = 0

    def test_encode_read_only(self):
        with pytest.raises(TypeError):
            TABLES.encode[0] = 0x4100

    def test_no_whitespace_in_blocks(self):
        for base in TABLES.decode:
            for cp in range(base, base + 0x100):
                assert not chr(cp).isspace(), hex(cp)


class TestWalkBlocks:
    def test_single_range(self):
        assert list(_walk_blocks([(0x1000, 0x12FF)])) == [0x1000, 0x1100, 0x1200]

    def test_consecutive_ranges(self):
        bases = list(_walk_blocks([(0x1000, 0x10FF), (0x2000, 0x21FF)]))
        assert bases == [0x1000, 0x2000, 0x2100]

    def test_misaligned(self):
        with pytest.raises(ValueError):
            list(_walk_blocks([(0x1080, 0x11FF)]))

    def test_empty(self):
        with pytest.raises(ValueError):
            list(_walk_blocks([(0x1000, 0x1000)]))

    def test_overlap(self):
        with pytest.raises(ValueError):
            list(_walk_blocks([(0x1000, 0x12FF), (0x1200, 0x13FF)]))

    def test_out_of_order(self):
        with pytest.raises(ValueError):
            list(_walk_blocks([(0x2000, 0x20FF), (0x1000, 0x10FF)]))

    def test_wrong_block_count(self):
        with pytest.raises(ValueError):
            _build_tables([(0x1000, 0x10FF)])


# ── Encoder ────────────────────────────────────────────────────────


class TestChunks:
    def test_even(self):
        assert list(_chunks(b"\x01\x02\x03\x04")) == [Pair(1, 2), Pair(3, 4)]

    def test_odd(self):
        assert list(_chunks(b"\x01\x02\x03")) == [Pair(1, 2), Odd(3)]

    def test_empty(self):
        assert list(_chunks(b"")) == []

    def test_single(self):
        assert list(_chunks([7])) == [Odd(7)]

    def test_zero_is_not_missing(self):
        assert list(_chunks([0, 0])) == [Pair(0, 0)]


class TestEncode:
    @pytest.mark.parametrize("data,cp", KNOWN)
    def test_known(self, data, cp):
        assert list(encode_iterable(data)) == [cp]

    def test_empty(self):
        assert list(encode_iterable(b"")) == []
        assert encode_text(b"") == ""

    def test_hello(self):
        assert encode_text(b"hello") == "\u9a68\ua36c\u156f"

    def test_length(self):
        rng = random.Random(1)
        for n in range(0, 40):
            data = _random_bytes(rng, n)
            assert len(encode_text(data)) == math.ceil(n / 2) == encoded_length(n)

    def test_accepts_iterables(self):
        expected = encode_text(b"\x10\x20\x30")
        assert encode_text(bytearray(b"\x10\x20\x30")) == expected
        assert encode_text(memoryview(b"\x10\x20\x30")) == expected
        assert encode_text([0x10, 0x20, 0x30]) == expected
        assert encode_text(iter([0x10, 0x20, 0x30])) == expected

    def test_lazy(self):
        consumed = []

        def source():
            for b in range(10):
                consumed.append(b)
                yield b

        it = encode_iterable(source())
        assert next(it) == 0x3500
        assert consumed == [0, 1]

    def test_rejects_non_octets(self):
        with pytest.raises(ValueError):
            list(encode_iterable([1, 256]))
        with pytest.raises(ValueError):
            list(encode_iterable([-1]))

    def test_custom_tables(self):
        tables = build_tables()
        assert list(encode_iterable(b"\x00\x01", tables)) == [0x3500]


# ── Decoder ────────────────────────────────────────────────────────


class TestDecode:
    @pytest.mark.parametrize("data,cp", KNOWN)
    def test_known(self, data, cp):
        assert bytes(decode_iterable([cp])) == data

    def test_padding_yields_one_byte(self):
        for cp in range(0x1500, 0x1600):
            assert list(decode_iterable([cp])) == [cp & 0xFF]

    def test_empty(self):
        assert list(decode_iterable([])) == []
        assert decode_text("") == b""

    def test_invalid(self):
        with pytest.raises(InvalidCodepoint) as info:
            decode_text("A")
        e = info.value
        assert e.codepoint == 0x41
        assert e.position == 0
        assert e.name == "LATIN CAPITAL LETTER A"
        assert "U+0041 LATIN CAPITAL LETTER A" in str(e)
        assert isinstance(e, Base65536Error)
        assert isinstance(e, ValueError)

    def test_invalid_position_counts_whitespace(self):
        with pytest.raises(InvalidCodepoint) as info:
            decode_text("\u3400 \u3400!")
        assert info.value.position == 3

    def test_output_before_failure(self):
        it = decode_iterable([0x3401, 0x41, 0x3400])
        assert next(it) == 0x01
        assert next(it) == 0x00
        with pytest.raises(InvalidCodepoint):
            next(it)

    def test_unnamed_codepoint(self):
        with pytest.raises(InvalidCodepoint) as info:
            decode_iterable_list([0xE000])
        assert info.value.name == "<unnamed>"

    def test_out_of_range(self):
        for cp in (-1, 0x110000, 0x7FFFFFFF):
            with pytest.raises(InvalidCodepoint) as info:
                decode_iterable_list([cp])
            assert info.value.name == "<out of range>"

    def test_lone_surrogate(self):
        with pytest.raises(InvalidCodepoint):
            decode_text("\ud861")

    def test_whitespace_skipped(self):
        text = encode_text(b"hello, world")
        for ws in (" ", "\n", "\r\n", "\t", "\u3000", "\u2028", "\x0b"):
            spaced = ws + ws.join(text) + ws
            assert decode_text(spaced) == b"hello, world"

    def test_whitespace_classes(self):
        for ws in ("\x1c", "\x1f", "\u1680", "\u2029", "\u205f"):
            assert decode_text(ws + "\u3400") == b"\x00\x00"

    def test_no_break_spaces_rejected(self):
        for ws in ("\x85", "\xa0", "\u2007", "\u202f"):
            with pytest.raises(InvalidCodepoint):
                decode_text("\u3400" + ws)

    def test_whitespace_only(self):
        assert decode_text(" \n\t ") == b""

    def test_custom_tables(self):
        tables = build_tables()
        assert bytes(decode_iterable([0x3500, 0x1502], tables)) == b"\x00\x01\x02"


class TestRoundTrip:
    @pytest.mark.parametrize("n", [0, 1, 2, 3, 16, 17, 255, 256, 1001, 65536, 65537])
    def test_lengths(self, n):
        data = _random_bytes(random.Random(n), n)
        assert bytes(decode_iterable(encode_iterable(data))) == data
        assert decode_text(encode_text(data)) == data

    def test_random(self):
        rng = random.Random(65536)
        for _ in range(200):
            data = _random_bytes(rng, rng.randint(16, 64))
            enc = encode(data)
            assert len(enc) > len(data)
            assert decode(enc) == data

    def test_all_pairs(self):
        data = bytes(b for hi in range(256) for lo in range(256) for b in (lo, hi))
        text = encode_text(data)
        assert len(set(text)) == 65536
        assert decode_text(text) == data


# \u2500\u2500 Text wrappers \u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500


class TestText:
    @pytest.mark.parametrize("data,cp", KNOWN)
    def test_known_utf8(self, data, cp):
        enc = chr(cp).encode("utf-8")
        assert encode(data, "utf-8") == enc
        assert decode(enc, "utf-8") == data

    @pytest.mark.parametrize("data,cp", KNOWN)
    def test_known_cesu8(self, data, cp):
        enc = chr(cp).encode("cesu-8")
        assert encode(data) == enc
        assert decode(enc) == data

    def test_default_is_cesu8(self):
        assert encode(b"\xff\xff") == b"\xed\xa1\xa1\xed\xb7\xbf"
        assert encode(b"\xff\xff", "utf-8") == b"\xf0\xa8\x97\xbf"

    def test_other_encodings(self):
        data = b"\x00\x01\xfe\xff\x7f"
        for name in ("utf-16", "utf-16-be", "utf-32-le", "utf-8"):
            assert decode(encode(data, name), name) == data

    def test_decode_str(self):
        assert decode(encode_text(b"abc"), "no-such-encoding") == b"abc"

    def test_decode_bytearray(self):
        assert decode(bytearray(encode(b"abc"))) == b"abc"

    def test_unknown_encoding(self):
        with pytest.raises(LookupError):
            encode(b"abc", "no-such-encoding")
        with pytest.raises(LookupError):
            decode(b"abc", "no-such-encoding")

    def test_malformed_text(self):
        with pytest.raises(InvalidEncodedText) as info:
            decode(b"\xe1\x94", "utf-8")
        assert isinstance(info.value.__cause__, UnicodeDecodeError)

    def test_cesu8_is_not_utf8(self):
        with pytest.raises(InvalidEncodedText):
            decode(encode(b"\xff\xff"), "utf-8")

    def test_utf8_is_not_cesu8(self):
        with pytest.raises(InvalidEncodedText):
            decode(encode(b"\xff\xff", "utf-8"))

    def test_invalid_character(self):
        with pytest.raises(InvalidCodepoint):
            decode(b"A")


# \u2500\u2500 CESU-8 \u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500


class TestCesu8:
    def test_aliases(self):
        for name in ("cesu-8", "cesu8", "cesu_8", "CESU-8"):
            assert codecs.lookup(name).name == "cesu-8"

    def test_ascii(self):
        assert "hello".encode("cesu-8") == b"hello"
        assert b"hello".decode("cesu-8") == "hello"

    def test_bmp_matches_utf8(self):
        s = "\xe9\u1500\u9a68\uffff"
        assert s.encode("cesu-8") == s.encode("utf-8")

    def test_supplementary(self):
        enc = "\U000285ff".encode("cesu-8")
        assert enc == "\ud861\uddff".encode("utf-8", "surrogatepass")
        assert len(enc) == 6
        assert enc.decode("cesu-8") == "\U000285ff"

    def test_return_lengths(self):
        assert cesu8.encode("a\U00020000") == (b"a\xed\xa1\x80\xed\xb0\x80", 2)
        assert cesu8.decode(b"a\xed\xa1\x80\xed\xb0\x80") == ("a\U00020000", 7)

    def test_four_byte_rejected(self):
        with pytest.raises(UnicodeDecodeError) as info:
            b"ab\xf0\xa8\x97\xbf".decode("cesu-8")
        assert info.value.start == 2
        assert info.value.end == 6

    def test_malformed(self):
        with pytest.raises(UnicodeDecodeError):
            b"\xed\xa1".decode("cesu-8")

    def test_lone_surrogate_passes(self):
        assert b"\xed\xa1\xa1".decode("cesu-8") == "\ud861"

    def test_error_handlers(self):
        assert b"a\xffb".decode("cesu-8", "replace") == "a\ufffdb"
        assert b"a\xffb".decode("cesu-8", "ignore") == "ab"
        assert b"a\xffb".decode("cesu-8", "backslashreplace") == "a\\xffb"

    def test_error_handler_four_byte(self):
        assert b"a\xf0\xa8\x97\xbfb".decode("cesu-8", "replace") == "a\ufffdb"

    def test_error_handler_keeps_pairs(self):
        data = b"\xff\xed\xa1\x80\xed\xb0\x80\xff"
        assert data.decode("cesu-8", "replace") == "\ufffd\U00020000\ufffd"

    def test_strict_error_position(self):
        with pytest.raises(UnicodeDecodeError) as info:
            b"ab\xffc".decode("cesu-8")
        assert info.value.encoding == "cesu-8"
        assert info.value.start == 2
        assert info.value.end == 3

    def test_encode_ignores_errors(self):
        assert "a\U00020000".encode("cesu-8", "replace") == b"a\xed\xa1\x80\xed\xb0\x80"

    def test_text_io_read(self):
        data = b"hello" + bytes(range(256))
        f = io.TextIOWrapper(io.BytesIO(encode(data)), encoding="cesu-8")
        assert decode_text(f.read()) == data

    def test_text_io_write(self):
        buf = io.BytesIO()
        f = io.TextIOWrapper(buf, encoding="cesu-8")
        f.write(encode_text(b"\xff\xff\x00"))
        f.flush()
        assert buf.getvalue() == encode(b"\xff\xff\x00")

    def test_open(self, tmp_path):
        path = tmp_path / "data.txt"
        text = encode_text(bytes(range(256)) * 4)
        with open(path, "w", encoding="cesu-8", newline="") as f:
            f.write(text)
        assert path.read_bytes() == text.encode("cesu-8")
        with open(path, encoding="cesu-8", newline="") as f:
            assert f.read() == text

    def test_incremental_decoder_byte_at_a_time(self):
        data = "a\U00020000\u9a68".encode("cesu-8")
        decoder = codecs.getincrementaldecoder("cesu-8")()
        out = [decoder.decode(data[i : i + 1]) for i in range(len(data))]
        out.append(decoder.decode(b"", final=True))
        assert "".join(out) == "a\U00020000\u9a68"
        # The pair comes out only once its low half has arrived.
        assert out[1:7] == [""] * 5 + ["\U00020000"]

    def test_incremental_decoder_truncated(self):
        decoder = codecs.getincrementaldecoder("cesu-8")()
        assert decoder.decode(b"a\xe9\xa9") == "a"
        with pytest.raises(UnicodeDecodeError):
            decoder.decode(b"", final=True)

    def test_incremental_decoder_high_surrogate_at_end(self):
        decoder = codecs.getincrementaldecoder("cesu-8")()
        assert decoder.decode(b"\xed\xa1\xa1") == ""
        assert decoder.decode(b"", final=True) == "\ud861"

    def test_incremental_encoder(self):
        encoder = codecs.getincrementalencoder("cesu-8")()
        data = encoder.encode("a") + encoder.encode("\U00020000", final=True)
        assert data == b"a\xed\xa1\x80\xed\xb0\x80"

    def test_stream_reader_writer(self):
        buf = io.BytesIO()
        writer = codecs.getwriter("cesu-8")(buf)
        writer.write("\u9a68\U000285ff")
        assert buf.getvalue() == "\u9a68\U000285ff".encode("cesu-8")
        buf.seek(0)
        reader = codecs.getreader("cesu-8")(buf)
        assert reader.read() == "\u9a68\U000285ff"


# \u2500\u2500 UCD XML audit \u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500\u2500


UCDXML = b"""<?xml version="1.0" encoding="UTF-8"?>
<ucd xmlns="http://www.unicode.org/ns/2003/ucd/1.0">
  <repertoire>
    <group gc="Lo" ccc="0" WSpace="N">
      <char cp="1500"/>
      <char first-cp="1501" last-cp="15FF"/>
    </group>
    <char cp="0020" gc="Zs" ccc="0" WSpace="Y"/>
    <reserved first-cp="0378" last-cp="0379" gc="Cn"/>
  </repertoire>
</ucd>
"""


def _letter():
    return {"kind": "char", "gc": "Lo", "ccc": "0", "WSpace": "N"}


class TestUcdXml:
    def test_load_file_object(self):
        rep = ucdxml_get_repertoire(load_ucdxml(io.BytesIO(UCDXML)))
        assert rep[0x1500] == _letter()
        assert rep[0x15FF] == _letter()
        assert rep[0x0020]["WSpace"] == "Y"
        assert rep[0x0378]["kind"] == "reserved"
        assert rep[0x1600] is None

    def test_load_path(self, tmp_path):
        path = tmp_path / "ucd.xml"
        path.write_bytes(UCDXML)
        rep = ucdxml_get_repertoire(load_ucdxml(str(path)))
        assert rep[0x1501]["gc"] == "Lo"

    def test_load_zip(self, tmp_path):
        import zipfile

        path = tmp_path / "ucd.all.flat.zip"
        with zipfile.ZipFile(path, "w") as z:
            z.writestr("ucd.all.flat.xml", UCDXML)
        rep = ucdxml_get_repertoire(load_ucdxml(str(path)))
        assert rep[0x1501]["gc"] == "Lo"

    def test_audit_from_xml(self):
        rep = ucdxml_get_repertoire(load_ucdxml(io.BytesIO(UCDXML)))
        reports = audit_blocks(rep)
        assert len(reports) == 257
        assert reports[0].base == 0x1500
        assert reports[0].index is None
        assert reports[0].ok
        assert reports[1].index == 0
        assert len(reports[1].unassigned) == 256

    def test_audit_problems(self):
        rep = [None] * 0x110000
        for cp in range(0x1500, 0x1600):
            rep[cp] = _letter()
        rep[0x1505] = {"kind": "char", "gc": "Zs", "ccc": "0", "WSpace": "Y"}
        rep[0x1506] = {"kind": "char", "gc": "Mn", "ccc": "230", "WSpace": "N"}
        rep[0x1507] = {"kind": "reserved", "gc": "Cn"}
        report = audit_blocks(rep)[0]
        assert not report.ok
        assert report.whitespace == [0x1505]
        assert report.combining == [0x1506]
        assert report.nonletter == [0x1505, 0x1506]
        assert report.unassigned == [0x1507]

    def test_blocks_are_letters(self):
        # Python's own copy of the UCD stands in for the XML file here.
        for base in TABLES.decode:
            for cp in range(base, base + 0x100):
                c = chr(cp)
                if unicodedata.category(c) == "Cn":
                    continue
                assert unicodedata.category(c).startswith("L"), hex(cp)
                assert unicodedata.combining(c) == 0, hex(cp)


# ── CLI ────────────────────────────────────────────────────────────


class TestWrapText:
    def test_disabled(self):
        assert wrap_text("abcdef", 0) == "abcdef"

    def test_wrap(self):
        assert wrap_text("abcde", 2) == "ab\ncd\ne\n"

    def test_exact(self):
        assert wrap_text("abcd", 2) == "ab\ncd\n"

    def test_empty(self):
        assert wrap_text("", 4) == ""


class TestCLI:
    def _run(self, *args, input=b""):
        result = subprocess.run(
            [sys.executable, "-m", "base65536", *args],
            input=input,
            capture_output=True,
        )
        return result

    def test_encode(self):
        r = self._run(input=b"hello")
        assert r.returncode == 0
        assert r.stdout == encode(b"hello")

    def test_encode_utf8(self):
        r = self._run("-e", "utf-8", input=b"hello")
        assert r.returncode == 0
        assert r.stdout.decode("utf-8") == "\u9a68\ua36c\u156f"

    def test_decode(self):
        r = self._run("-d", input=encode(b"hello"))
        assert r.returncode == 0
        assert r.stdout == b"hello"

    def test_wrap_round_trip(self):
        data = bytes(range(256)) * 3
        r = self._run("-w", "16", input=data)
        assert r.returncode == 0
        lines = r.stdout.decode("cesu-8").splitlines()
        assert len(lines) == math.ceil(len(data) / 2 / 16)
        r = self._run("-d", input=r.stdout)
        assert r.returncode == 0
        assert r.stdout == data

    def test_files(self, tmp_path):
        src = tmp_path / "data.bin"
        enc = tmp_path / "data.txt"
        out = tmp_path / "out.bin"
        src.write_bytes(b"\x00\x01\x02")
        assert self._run("-i", str(src), "-o", str(enc)).returncode == 0
        assert enc.read_bytes() == encode(b"\x00\x01\x02")
        assert self._run("-d", "-i", str(enc), "-o", str(out)).returncode == 0
        assert out.read_bytes() == b"\x00\x01\x02"

    def test_invalid_input(self):
        r = self._run("-d", input=b"not base65536")
        assert r.returncode == 1
        assert "base65536: error:" in r.stderr.decode()
        assert "LATIN SMALL LETTER N" in r.stderr.decode()

    def test_malformed_input(self):
        r = self._run("-d", "-e", "utf-8", input=b"\xff")
        assert r.returncode == 1
        assert "not valid utf-8" in r.stderr.decode()

    def test_unknown_encoding(self):
        r = self._run("-e", "no-such-encoding", input=b"x")
        assert r.returncode == 2
        assert "unknown encoding" in r.stderr.decode()

    def test_bytes_codec_rejected(self):
        r = self._run("-e", "hex", input=b"x")
        assert r.returncode == 2
        assert "not a text encoding" in r.stderr.decode()

    def test_negative_wrap(self):
        r = self._run("-w", "-1", input=b"x")
        assert r.returncode == 2

    def test_missing_input_file(self, tmp_path):
        r = self._run("-i", str(tmp_path / "missing"))
        assert r.returncode == 2
        assert "cannot read" in r.stderr.decode()

    def test_verbose(self):
        r = self._run("-v", input=b"hello")
        assert r.returncode == 0
        assert "encoded 5 bytes into 3 code points" in r.stderr.decode()

    def test_version(self):
        r = self._run("--version")
        assert r.returncode == 0
        assert base65536.__version__ in r.stdout.decode()

    def test_help(self):
        r = self._run("--help")
        assert r.returncode == 0
        assert "base65536" in r.stdout.decode()


# ── Doctests ───────────────────────────────────────────────────────


class TestDoctests:
    def test_package(self):
        assert doctest.testmod(base65536).failed == 0

    def test_cesu8(self):
        assert doctest.testmod(cesu8).failed == 0
