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

from . import *
from . import __version__
import argparse
import logging
import sys

log = logging.getLogger("base65536")


def wrap_text(text, cols):
    """Inserts a newline after every ``cols`` characters of ``text``."""
    if cols <= 0:
        return text
    lines = [text[i : i + cols] for i in range(0, len(text), cols)]
    return "\n".join(lines) + ("\n" if lines else "")


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="base65536",
        description="Base65536 encode or decode FILE, or standard input, to standard output.",
    )
    parser.add_argument(
        "-d",
        "--decode",
        action="store_true",
        help="decode data (default: encode)",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        default="cesu-8",
        help="text encoding of the encoded form (default: cesu-8)",
    )
    parser.add_argument(
        "-w",
        "--wrap",
        type=int,
        default=0,
        metavar="COLS",
        help="wrap encoded lines after COLS characters; 0 disables (default: 0)",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        metavar="FILE",
        help="read data from FILE (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        metavar="FILE",
        help="write output to FILE instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + __version__,
    )

    parsed = parser.parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if parsed.wrap < 0:
        parser.error(f"--wrap must not be negative: {parsed.wrap}")

    try:
        # Rejects unknown names and bytes-to-bytes codecs such as "hex".
        "".encode(parsed.encoding)
        b"".decode(parsed.encoding)
    except LookupError as e:
        parser.error(str(e))

    # Read data from input file or stdin
    if parsed.input:
        try:
            with open(parsed.input, "rb") as f:
                data = f.read()
        except OSError as e:
            parser.error(f"cannot read {parsed.input}: {e.strerror}")
    else:
        data = sys.stdin.buffer.read()

    if parsed.decode:
        try:
            result = decode(data, parsed.encoding)
        except Base65536Error as e:
            parser.exit(1, f"{parser.prog}: error: {e}\n")
        log.debug("decoded %d bytes into %d bytes", len(data), len(result))
    else:
        text = encode_text(data)
        log.debug("encoded %d bytes into %d code points", len(data), len(text))
        result = wrap_text(text, parsed.wrap).encode(parsed.encoding)

    # Handle output file
    if parsed.output:
        with open(parsed.output, "wb") as f:
            f.write(result)
    else:
        sys.stdout.buffer.write(result)
        sys.stdout.buffer.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
