from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024

HEX_DIGEST_PATTERN = re.compile(r"[0-9a-f]{64}")
BYTE_COUNT_PATTERN = re.compile(r"[0-9]+")


class HashIOError(RuntimeError):
    """Raised when the input file cannot be opened or read."""


@dataclass(frozen=True, slots=True)
class FileDigest:
    hexdigest: str
    size: int

    def to_line(self) -> str:
        return f"{self.hexdigest} {self.size}"

    @classmethod
    def parse_line(cls, text: str) -> FileDigest:
        """Parse a ``<hexdigest> <size>`` line as printed by the CLI."""

        fields = text.split()
        if len(fields) < 2:
            raise ValueError(f"malformed digest line: {text!r}")
        hexdigest, raw_size = fields[0], fields[1]
        if not HEX_DIGEST_PATTERN.fullmatch(hexdigest):
            raise ValueError(f"malformed sha256 digest: {hexdigest!r}")
        if not BYTE_COUNT_PATTERN.fullmatch(raw_size):
            raise ValueError(f"malformed byte count: {raw_size!r}")
        return cls(hexdigest=hexdigest, size=int(raw_size))


def sha256_file(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> FileDigest:
    """Stream ``path`` through SHA-256 and count the bytes read.

    Open and read failures are raised as :class:`HashIOError`; no partial
    digest is ever returned.
    """

    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ValueError("chunk_size must be a positive integer")

    hasher = hashlib.sha256()
    total = 0
    logger.debug("Hashing %s (chunk_size=%d)", path, chunk_size)
    try:
        with Path(path).open("rb") as fh:
            for chunk in iter(lambda: fh.read(chunk_size), b""):
                hasher.update(chunk)
                total += len(chunk)
    except OSError as exc:
        raise HashIOError(str(exc)) from exc

    result = FileDigest(hexdigest=hasher.hexdigest(), size=total)
    logger.debug("Hashed %s: %d bytes", path, total)
    return result
