"""
pdfrecover core package.

This package carves PDF documents out of raw binary dumps: it scans for
``%PDF-`` headers, drops coincidental matches, cuts one candidate per
``%%EOF`` that follows each header and hands every candidate to qpdf
for repair. The modules only depend on the standard library; the
repair tool itself is an external program.
"""

# Re-export common classes for convenience
from .carver import Candidate, carve_candidates
from .config import RecoveryConfig
from .exceptions import CleanupError, DumpReadError, RecoveryError, StagingError
from .parser import HeaderParser, ParsedHeader
from .pipeline import DumpRecovery, RecoveryReport, recover_dump
from .recovery import QPDFRepairer, RepairOutcome, RepairStatus
from .signatures import PDF

__all__ = [
    'Candidate',
    'carve_candidates',
    'RecoveryConfig',
    'RecoveryError',
    'DumpReadError',
    'StagingError',
    'CleanupError',
    'HeaderParser',
    'ParsedHeader',
    'DumpRecovery',
    'RecoveryReport',
    'recover_dump',
    'QPDFRepairer',
    'RepairOutcome',
    'RepairStatus',
    'PDF',
]
