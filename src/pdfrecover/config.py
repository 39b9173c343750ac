"""
Run configuration for pdfrecover.

A :class:`RecoveryConfig` is built once (usually by the command line
front end) and handed to every component. Nothing in the package reads
process-wide settings on its own; the only exception is the child
environment produced by :meth:`RecoveryConfig.tool_env`, which starts
from ``os.environ``.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_TOOL = "qpdf"
DEFAULT_STAGING_DIR = os.path.join(".", "temp")
DEFAULT_RESULT_DIR = os.path.join(".", "result")

@dataclass(frozen=True)
class RecoveryConfig:
    """Settings for a single recovery run.

    Attributes
    ----------
    source: str
        Path to the dump file to carve.
    tool: str
        Repair tool executable, either a bare name looked up on ``PATH``
        or a path to the binary.
    tool_home: str, optional
        Installation directory of the repair tool. When set, its ``bin``
        sub-directory is appended to ``PATH`` for the child process.
    staging_dir: str
        Directory holding carved candidates while they are repaired.
        Removed at the end of the run.
    result_dir: str
        Directory receiving repaired documents. Never removed.
    strict_exit_codes: bool
        Treat exit codes other than 0, 1 and 3 as failures instead of
        the default where only 2 fails.
    """
    source: str = ""
    tool: str = DEFAULT_TOOL
    tool_home: Optional[str] = None
    staging_dir: str = DEFAULT_STAGING_DIR
    result_dir: str = DEFAULT_RESULT_DIR
    strict_exit_codes: bool = False

    def staged_path(self, index: int) -> str:
        return os.path.join(self.staging_dir, f"{index}.pdf")

    def result_path(self, index: int) -> str:
        return os.path.join(self.result_dir, f"{index}.pdf")

    def tool_env(self) -> Optional[Dict[str, str]]:
        """Return the environment for the repair tool, or ``None`` to inherit."""
        if not self.tool_home:
            return None
        env = dict(os.environ)
        bin_dir = os.path.join(self.tool_home, "bin")
        path = env.get("PATH", "")
        env["PATH"] = f"{path}{os.pathsep}{bin_dir}" if path else bin_dir
        return env

    def replace(self, **changes) -> "RecoveryConfig":
        return dataclasses.replace(self, **changes)
