"""
PDF header parser for pdfrecover.

The literal ``%PDF-`` turns up by chance in arbitrary binary data, so a
scanner hit is only a candidate. Real PDF headers carry a version with
one decimal digit (``%PDF-1.4``, ``%PDF-1.7``). Note that ``%PDF-2.0``
parses as an integer and is rejected along with the false positives.
The parser reads a small window at the hit, pulls the version number
out of it and keeps the hit only when that number has a fractional
part.

The number is read the lenient way: leading whitespace is skipped and
only the longest numeric prefix counts, so ``1.4\\r%`` parses as 1.4
while ``9\\x00\\x00`` parses as the integer 9 and ``abc`` does not parse
at all.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .signatures import PDF, FileSignature

# ASCII digits only; float() would also take other scripts' digits
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

def parse_leading_float(text: str) -> Optional[float]:
    """Parse the longest leading decimal number of ``text``.

    Returns ``None`` when ``text`` does not start (after whitespace)
    with a number.
    """
    m = _LEADING_NUMBER.match(text)
    if not m:
        return None
    try:
        return float(m.group(1))
    except ValueError:
        return None

@dataclass
class ParsedHeader:
    """A header candidate and the version read from it.

    Attributes
    ----------
    offset: int
        Position of the header marker in the dump.
    version: float or None
        Parsed version number, ``None`` if the window held no number.
    raw: bytes
        The bytes of the inspection window (may be shorter than the
        window size at the very end of the dump).
    """
    offset: int
    version: Optional[float]
    raw: bytes

    @property
    def is_genuine(self) -> bool:
        v = self.version
        return v is not None and math.isfinite(v) and not v.is_integer()

class HeaderParser:
    """Parse header candidates found by the scanner."""

    def __init__(self, sig: FileSignature = PDF) -> None:
        self.sig = sig

    def parse(self, dump: bytes, offset: int) -> ParsedHeader:
        raw = bytes(dump[offset:offset + self.sig.version_window])
        text = raw.decode("utf-8", errors="replace")
        prefix = self.sig.header.decode("ascii")
        if text.startswith(prefix):
            text = text[len(prefix):]
        return ParsedHeader(offset=offset, version=parse_leading_float(text), raw=raw)

def is_pdf_header(dump: bytes, offset: int, sig: FileSignature = PDF) -> bool:
    """Return True if the header at ``offset`` looks like a real document."""
    return HeaderParser(sig).parse(dump, offset).is_genuine

def validate_offsets(dump: bytes, offsets: Iterable[int],
                     sig: FileSignature = PDF) -> Iterator[int]:
    """Yield only the offsets whose header carries a non-integer version."""
    parser = HeaderParser(sig)
    for off in offsets:
        if parser.parse(dump, off).is_genuine:
            yield off
