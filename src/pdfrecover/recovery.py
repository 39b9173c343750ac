"""
Repair invoker for pdfrecover.

Carved candidates are rarely valid documents as-is: they may be
truncated, carry stale cross-reference tables or trailing garbage from
the dump. Each staged candidate is handed to qpdf, which rebuilds the
structure and writes a linearized copy to the result directory.

qpdf documents its exit status as follows
(https://qpdf.readthedocs.io/en/stable/cli.html#exit-status):

=====  ==============================================
0      no errors or warnings were found
1      not used
2      errors were found; the file was not processed
3      warnings were found without errors
=====  ==============================================

Only 2 means nothing usable was produced, and by default every other
status, including ones qpdf does not define, counts as recovered. With
``strict_exit_codes`` only 0, 1 and 3 count as recovered.

A failure of one candidate never affects another: each invocation runs
on its own and its result is reported as a :class:`RepairOutcome`
rather than raised.
"""

from __future__ import annotations

import enum
import logging
import shutil
import subprocess
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .config import RecoveryConfig
from .exceptions import StagingError
from .utils import ensure_dir

logger = logging.getLogger(__name__)

LINEARIZE_FLAGS = ("--linearize", "--remove-unreferenced-resources=yes")

EXIT_OK = 0
EXIT_UNUSED = 1
EXIT_ERRORS = 2
EXIT_WARNINGS = 3

class RepairStatus(enum.Enum):
    RECOVERED = "recovered"
    FAILED = "failed"

def classify_exit_code(code: Optional[int], strict: bool = False) -> RepairStatus:
    """Map a tool exit status to a :class:`RepairStatus`.

    ``None`` (the tool never ran) is always a failure.
    """
    if code is None or code == EXIT_ERRORS:
        return RepairStatus.FAILED
    if strict and code not in (EXIT_OK, EXIT_UNUSED, EXIT_WARNINGS):
        return RepairStatus.FAILED
    return RepairStatus.RECOVERED

@dataclass
class RepairOutcome:
    """Result of running the repair tool on one candidate.

    Attributes
    ----------
    index: int
        Candidate index.
    status: RepairStatus
        Whether the candidate counts as recovered.
    exit_code: int or None
        Tool exit status, ``None`` if the tool could not be started.
    input_path: str
        Staged candidate handed to the tool.
    output_path: str
        Where the tool was asked to write the repaired document. The
        file may be missing for failed outcomes.
    stdout, stderr: str
        Captured tool output. For launch failures ``stderr`` holds the
        error message.
    """
    index: int
    status: RepairStatus
    exit_code: Optional[int]
    input_path: str
    output_path: str
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.status is RepairStatus.RECOVERED

class QPDFRepairer:
    """Run the repair tool over staged candidates."""

    def __init__(self, config: RecoveryConfig) -> None:
        """Create a repairer and make sure the result directory exists.

        Raises
        ------
        StagingError
            If the result directory cannot be created.
        """
        self.config = config
        self._env = config.tool_env()
        try:
            ensure_dir(config.result_dir)
        except OSError as e:
            raise StagingError(f"Cannot create result directory {config.result_dir}: {e}") from e

    def command(self, index: int) -> List[str]:
        return [self._tool(), *LINEARIZE_FLAGS,
                self.config.staged_path(index), self.config.result_path(index)]

    def _tool(self) -> str:
        tool = self.config.tool
        if self._env is not None:
            # resolve against the extended PATH; Windows ignores env for lookup
            return shutil.which(tool, path=self._env.get("PATH")) or tool
        return tool

    def recover(self, index: int) -> RepairOutcome:
        """Repair a single staged candidate."""
        cfg = self.config
        logger.info("Recovering %d", index)
        try:
            proc = subprocess.run(self.command(index), capture_output=True,
                                  text=True, errors="replace", env=self._env)
        except OSError as e:
            logger.warning("Failed to recover %d: cannot run %s: %s", index, cfg.tool, e)
            return RepairOutcome(index=index, status=RepairStatus.FAILED, exit_code=None,
                                 input_path=cfg.staged_path(index),
                                 output_path=cfg.result_path(index), stderr=str(e))

        status = classify_exit_code(proc.returncode, cfg.strict_exit_codes)
        if status is RepairStatus.FAILED:
            logger.warning("Failed to recover %d (exit %d)", index, proc.returncode)
        else:
            logger.info("Recovered %d", index)
        if proc.stderr:
            logger.debug("%s [%d]: %s", cfg.tool, index, proc.stderr.strip())
        return RepairOutcome(index=index, status=status, exit_code=proc.returncode,
                             input_path=cfg.staged_path(index),
                             output_path=cfg.result_path(index),
                             stdout=proc.stdout or "", stderr=proc.stderr or "")

    def repair_all(self, indices: Sequence[int],
                   progress_cb: Optional[Callable[[RepairOutcome], None]] = None
                   ) -> List[RepairOutcome]:
        """Repair every index concurrently and wait for all of them.

        Outcomes are returned in the order of ``indices``. ``progress_cb``
        runs on the calling thread, once per outcome, in completion order.
        """
        if not indices:
            return []
        cb = progress_cb or (lambda o: None)
        with ThreadPoolExecutor(max_workers=len(indices)) as pool:
            futures = [pool.submit(self.recover, i) for i in indices]
            for fut in as_completed(futures):
                cb(fut.result())
        return [f.result() for f in futures]
