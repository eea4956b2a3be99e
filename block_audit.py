#!/usr/bin/env python3
"""Audit the Base65536 blocks and compare encoded sizes with Base64.

If a UCD XML archive is found, every block is checked for code points
that are unassigned, whitespace, combining or not letters.  The size
comparison runs regardless.
"""

import sys
import os
import base64
import random

from base65536 import TABLES, encode, encode_text

TEXT_ENCODINGS = ["utf-8", "cesu-8", "utf-16-le", "utf-32-le"]

SAMPLE_SIZES = [1, 2, 15, 16, 255, 256, 4096, 65537]


def try_ucdxml(ucdxml_path):
    """Load Unicode data from UCD XML and audit every block."""
    from base65536.ucdxml import load_ucdxml, ucdxml_get_repertoire, audit_blocks

    print(f"Loading Unicode data from {ucdxml_path}...")
    repertoire = ucdxml_get_repertoire(load_ucdxml(ucdxml_path))
    reports = audit_blocks(repertoire, TABLES)

    print(f"\n{'='*70}")
    print(f"Block audit: {len(reports)} blocks")
    print(f"{'='*70}")
    print(f"{'Block':<10} {'Byte':<6} {'Unassigned':<11} {'Space':<6} {'Combining':<10} {'Nonletter':<10}")
    print(f"{'-'*70}")

    bad = 0
    for r in reports:
        if r.ok:
            continue
        bad += 1
        byte = "pad" if r.index is None else f"{r.index:02X}"
        print(
            f"U+{r.base:04X}   {byte:<6} {len(r.unassigned):<11} {len(r.whitespace):<6} "
            f"{len(r.combining):<10} {len(r.nonletter):<10}"
        )

    if not bad:
        print("  All blocks consist of assigned, non-combining letters.")
    return bad


def size_comparison():
    """Print encoded sizes of random data in each text encoding."""
    print(f"\n{'='*70}")
    print(f"Encoded size (bytes) vs. Base64")
    print(f"{'='*70}")

    header = f"{'Input':<8} {'Base64':<8} {'Chars':<8}"
    for name in TEXT_ENCODINGS:
        header += f" {name:<10}"
    print(header)
    print(f"{'-'*70}")

    rng = random.Random(65536)
    for n in SAMPLE_SIZES:
        data = bytes(rng.getrandbits(8) for _ in range(n))
        row = f"{n:<8} {len(base64.b64encode(data)):<8} {len(encode_text(data)):<8}"
        for name in TEXT_ENCODINGS:
            row += f" {len(encode(data, name)):<10}"
        print(row)

    print()
    print("  Chars: code points of Base65536 output; Base64 counts characters too.")


def main():
    # Try to find UCD XML file
    ucd_paths = [
        "ucd.all.flat.zip",
        "ucd.all.grouped.zip",
        "../ucd.all.flat.zip",
        "../ucd.all.grouped.zip",
        os.path.expanduser("~/ucd.all.flat.zip"),
        os.path.expanduser("~/ucd.all.grouped.zip"),
    ]

    if len(sys.argv) > 1:
        ucd_paths.insert(0, sys.argv[1])

    ucd_found = None
    for path in ucd_paths:
        if os.path.exists(path):
            ucd_found = path
            break

    bad = 0
    if ucd_found:
        print(f"Found UCD file: {ucd_found}\n")
        bad = try_ucdxml(ucd_found)
    else:
        print("Unicode UCD XML file not found; skipping block audit.")
        print("Download from: https://www.unicode.org/Public/UCD/latest/ucdxml/")
        print("Expected filename: ucd.all.flat.zip or ucd.all.grouped.zip")

    size_comparison()
    return 1 if bad else 0


if __name__ == "__main__":
    sys.exit(main())
