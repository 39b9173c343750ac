"""
Staging area for carved candidates.

Every candidate is written to ``<staging_dir>/<index>.pdf`` before the
repair tool sees it, and the whole directory is removed once all
repairs have settled. Unlike repair failures, a failed write aborts the
run: a candidate that never reached disk cannot be repaired.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Sequence

from .carver import Candidate
from .config import RecoveryConfig
from .exceptions import CleanupError, StagingError
from .scanner import Buffer
from .utils import ensure_dir, remove_tree, write_file

logger = logging.getLogger(__name__)

def stage_candidates(dump: Buffer, candidates: Sequence[Candidate],
                     config: RecoveryConfig) -> List[str]:
    """Write every candidate to the staging directory.

    All writes are submitted at once and the call returns only after each
    of them has finished or failed. If any write failed,
    :class:`StagingError` is raised for the first failing index (lowest
    index wins) once the others have settled.

    Returns
    -------
    list of str
        Staged file paths, in candidate index order.
    """
    try:
        ensure_dir(config.staging_dir)
    except OSError as e:
        raise StagingError(f"Cannot create staging directory {config.staging_dir}: {e}") from e
    if not candidates:
        return []

    def _write(c: Candidate) -> str:
        return write_file(config.staged_path(c.index), c.view(dump))

    with ThreadPoolExecutor(max_workers=len(candidates)) as pool:
        futures = [pool.submit(_write, c) for c in candidates]
        wait(futures)

    paths: List[str] = []
    for c, fut in zip(candidates, futures):
        err = fut.exception()
        if err is not None:
            raise StagingError(f"Failed to stage candidate {c.index}: {err}") from err
        paths.append(fut.result())
    logger.info("Staged %d candidate(s) in %s", len(paths), config.staging_dir)
    return paths

def cleanup_staging(config: RecoveryConfig) -> None:
    """Remove the staging directory and everything in it."""
    try:
        remove_tree(config.staging_dir)
    except OSError as e:
        raise CleanupError(f"Cannot remove staging directory {config.staging_dir}: {e}") from e
    logger.debug("Removed %s", config.staging_dir)
