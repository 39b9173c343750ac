"""
End-to-end recovery run.

:class:`DumpRecovery` ties the components together in the order data
flows through them::

    dump -> headers -> validated headers -> candidates
         -> staged files -> repair outcomes -> staging removed

The dump is dropped as soon as the candidates are on disk; only the
staged files are needed from then on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .carver import Candidate, carve_candidates
from .config import RecoveryConfig
from .rawio import read_dump
from .recovery import QPDFRepairer, RepairOutcome
from .signatures import PDF, FileSignature
from .staging import cleanup_staging, stage_candidates

logger = logging.getLogger(__name__)

@dataclass
class RecoveryReport:
    """Everything a run produced, ordered by candidate index."""
    candidates: List[Candidate] = field(default_factory=list)
    outcomes: List[RepairOutcome] = field(default_factory=list)

    @property
    def recovered(self) -> List[RepairOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[RepairOutcome]:
        return [o for o in self.outcomes if not o.ok]

class DumpRecovery:
    """
    Carve PDF candidates out of a dump and repair each one.
    """
    def __init__(
        self,
        config: RecoveryConfig,
        sig: FileSignature = PDF,
        progress_cb: Optional[Callable[[RepairOutcome], None]] = None,
    ):
        self.config = config
        self.sig = sig
        self.progress_cb = progress_cb or (lambda o: None)

    def carve(self, dump: bytes) -> List[Candidate]:
        return carve_candidates(dump, self.sig)

    def run(self, dump: Optional[bytes] = None) -> RecoveryReport:
        """Run the whole pipeline.

        ``dump`` defaults to the contents of ``config.source``. When no
        candidate is found nothing is written and no tool is started.
        Raises :class:`pdfrecover.exceptions.RecoveryError` subclasses on
        fatal errors; per-candidate failures end up in the report.
        """
        cfg = self.config
        if dump is None:
            dump = read_dump(cfg.source)
        candidates = self.carve(dump)
        if not candidates:
            logger.info("No %s candidates found", self.sig.name)
            return RecoveryReport()

        stage_candidates(dump, candidates, cfg)
        del dump

        repairer = QPDFRepairer(cfg)
        outcomes = repairer.repair_all([c.index for c in candidates], self.progress_cb)
        cleanup_staging(cfg)

        report = RecoveryReport(candidates=candidates, outcomes=outcomes)
        logger.info("Recovered %d of %d candidate(s)", len(report.recovered), len(candidates))
        return report

def recover_dump(source: str, progress_cb: Optional[Callable[[RepairOutcome], None]] = None,
                 **overrides) -> RecoveryReport:
    """Convenience wrapper: build a config for ``source`` and run it."""
    config = RecoveryConfig(source=source, **overrides)
    return DumpRecovery(config, progress_cb=progress_cb).run()
