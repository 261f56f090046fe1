from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from fast_hash.config.settings import AppSettings
from fast_hash.core.digest import FileDigest, sha256_file

logger = logging.getLogger(__name__)


def _run_external(tool: str, path: str | Path, timeout_s: int) -> FileDigest | None:
    try:
        proc = subprocess.run(
            [tool, "sha256", str(path)],
            capture_output=True,
            text=True,
            timeout=timeout_s,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("External hasher %s failed to run: %s", tool, exc)
        return None

    if proc.returncode != 0:
        logger.warning("External hasher %s exited with %d", tool, proc.returncode)
        return None
    try:
        return FileDigest.parse_line(proc.stdout)
    except ValueError as exc:
        logger.warning("External hasher %s produced unusable output: %s", tool, exc)
        return None


def sha256_evidence(path: str | Path, settings: AppSettings | None = None) -> FileDigest:
    """Hash an evidence file, preferring the external ``fast-hash`` tool.

    Any failure of the external tool falls back to in-process hashing, whose
    :class:`~fast_hash.core.digest.HashIOError` propagates to the caller.
    """

    settings = settings or AppSettings()
    evidence = settings.evidence

    if evidence.prefer_external:
        tool = shutil.which(evidence.external_tool)
        if tool:
            result = _run_external(tool, path, evidence.timeout_s)
            if result is not None:
                return result
        else:
            logger.debug("External hasher %s not found on PATH", evidence.external_tool)

    return sha256_file(path, chunk_size=settings.hashing.chunk_size)
