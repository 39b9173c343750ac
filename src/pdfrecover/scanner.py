"""
Byte signature scanner.

The scanner walks a raw buffer looking for a literal marker and yields
every position at which it starts. It knows nothing about the format
behind the marker; telling real headers from coincidental matches is
the job of :mod:`pdfrecover.parser`.

Each scan is a plain generator over ``(buffer, marker, start)``, so a
scan can be restarted simply by calling the function again and two
scans never share state.
"""

from __future__ import annotations

from typing import Iterator, Union

from .signatures import PDF, FileSignature

Buffer = Union[bytes, bytearray]

def iter_offsets(buffer: Buffer, marker: bytes, start: int = 0) -> Iterator[int]:
    """Yield every offset of ``marker`` in ``buffer`` at or after ``start``.

    After a hit at ``i`` the search resumes at ``i + 1`` rather than
    ``i + len(marker)``, so overlapping occurrences are reported too.
    Offsets come out strictly increasing. An empty marker yields nothing.
    """
    if not marker:
        return
    pos = max(0, start)
    while True:
        idx = buffer.find(marker, pos)
        if idx < 0:
            return
        yield idx
        pos = idx + 1

def scan_headers(dump: Buffer, sig: FileSignature = PDF) -> Iterator[int]:
    """Yield candidate header offsets for ``sig`` in ``dump``."""
    return iter_offsets(dump, sig.header)

def scan_footers(dump: Buffer, start: int, sig: FileSignature = PDF) -> Iterator[int]:
    """Yield absolute footer offsets for ``sig`` at or after ``start``.

    This is the same as scanning the sub-buffer ``dump[start:]`` and
    shifting the hits by ``start``, without copying the tail.
    """
    return iter_offsets(dump, sig.footer, start)
