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
Check the Base65536 blocks against the Unicode Character Database.

Reads the XML form of the UCD (``ucd.all.flat.zip`` or
``ucd.all.grouped.zip`` from https://www.unicode.org/Public/UCD/latest/ucdxml/)
and reports, per block, every code point that would make a poor carrier
for data: unassigned, whitespace, combining, or not a letter.
"""

import collections
import zipfile

from lxml import objectify

from . import TABLES, BLOCK_SIZE

__all__ = [
    "BlockReport",
    "load_ucdxml",
    "ucdxml_get_repertoire",
    "audit_blocks",
]

LETTER_CATEGORIES = frozenset(["Lu", "Ll", "Lt", "Lm", "Lo"])


def _process_element(elt, ucd, attrs=None):
    if elt.tag.endswith("}group"):
        g = elt.attrib
        for elt in elt.getchildren():
            _process_element(elt, ucd, g)
    elif elt.tag.split("}")[1] in ("char", "noncharacter", "reserved", "surrogate"):
        if attrs is None:
            u = dict(elt.attrib)
        else:
            u = dict(attrs)
            u.update(elt.attrib)
        u["kind"] = elt.tag.split("}")[1]

        if "cp" in u:
            cp = int(u.pop("cp"), 16)
            ucd[cp] = u
        else:
            first_cp = int(u.pop("first-cp"), 16)
            last_cp = int(u.pop("last-cp"), 16)
            for cp in range(first_cp, last_cp + 1):
                ucd[cp] = u


def load_ucdxml(s):
    """Parses a UCD XML file.

    ``s`` is a file object, or the path of an XML file or of a zip
    archive holding one.
    """
    if hasattr(s, "read"):
        s = s.read()
    elif zipfile.is_zipfile(s):
        with zipfile.ZipFile(s) as z:
            with z.open(z.namelist()[0]) as f:
                s = f.read()
    else:
        with open(s, "rb") as f:
            s = f.read()

    return objectify.fromstring(s)


def ucdxml_get_repertoire(ucdxml):
    """Returns a list indexed by code point of property dicts, or None
    where the file says nothing about the code point."""
    ucd = [None] * 0x110000
    for elt in ucdxml.repertoire.getchildren():
        _process_element(elt, ucd)
    return ucd


class BlockReport(
    collections.namedtuple(
        "BlockReport", ["base", "index", "unassigned", "whitespace", "combining", "nonletter"]
    )
):
    """Problem code points found in one block.  ``index`` is the byte
    value the block encodes, or None for the padding block."""

    __slots__ = ()

    @property
    def ok(self):
        return not (self.unassigned or self.whitespace or self.combining or self.nonletter)


def _audit_block(repertoire, base, index):
    unassigned, whitespace, combining, nonletter = [], [], [], []
    for cp in range(base, base + BLOCK_SIZE):
        u = repertoire[cp]
        if u is None or u.get("kind") != "char" or u.get("gc", "Cn") == "Cn":
            unassigned.append(cp)
            continue
        if u.get("WSpace") == "Y":
            whitespace.append(cp)
        if u.get("ccc", "0") != "0":
            combining.append(cp)
        if u.get("gc") not in LETTER_CATEGORIES:
            nonletter.append(cp)
    return BlockReport(base, index, unassigned, whitespace, combining, nonletter)


def audit_blocks(repertoire, tables=TABLES):
    """Audits every block in ``tables``; padding block first."""
    reports = [_audit_block(repertoire, tables.padding, None)]
    for index, base in enumerate(tables.encode):
        reports.append(_audit_block(repertoire, base, index))
    return reports


if __name__ == "__main__":
    import sys

    reports = audit_blocks(ucdxml_get_repertoire(load_ucdxml(sys.argv[1])))
    bad = [r for r in reports if not r.ok]
    for r in bad:
        print("U+%04X: %s" % (r.base, r))
    sys.exit(1 if bad else 0)
