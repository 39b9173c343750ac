import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .parser import validate_offsets
from .scanner import Buffer, scan_footers, scan_headers
from .signatures import PDF, FileSignature

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Candidate:
    """A byte range ``[start, end)`` of the dump that may hold a document.

    ``index`` is the candidate's position in the run's flattened list and
    names its staged and repaired files.
    """
    index: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start

    def view(self, dump: Buffer) -> memoryview:
        """Zero-copy view of the candidate's bytes."""
        return memoryview(dump)[self.start:self.end]

    def slice(self, dump: Buffer) -> bytes:
        return bytes(self.view(dump))

def split_segments(dump: Buffer, start: int, sig: FileSignature = PDF) -> Iterator[int]:
    """Yield the end position of every candidate starting at ``start``.

    One end per footer found after the header, each just past the
    footer's last byte. Documents updated in place carry several
    footers, so the ranges nest. A header with no footer yields nothing.
    """
    for idx in scan_footers(dump, start, sig):
        yield idx + sig.footer_len

def carve_candidates(dump: Buffer, sig: FileSignature = PDF,
                     starts: Optional[Iterable[int]] = None) -> List[Candidate]:
    """
    Scan ``dump`` and return every candidate range, indexed in order of
    header offset, then footer offset.
    """
    if starts is None:
        starts = validate_offsets(dump, scan_headers(dump, sig), sig)
    out: List[Candidate] = []
    for start in starts:
        ends = list(split_segments(dump, start, sig))
        if not ends:
            logger.debug("Header at 0x%x has no %s, skipped", start, sig.footer)
            continue
        for end in ends:
            out.append(Candidate(index=len(out), start=start, end=end))
        logger.debug("Header at 0x%x -> %d candidate(s)", start, len(ends))
    logger.info("Carved %d candidate(s)", len(out))
    return out
