# -*- coding: utf-8 -*-
"""
QR SVG Storage Module

Writes rendered documents to files. Failures are returned as a
:class:`SaveResult` naming the phase (open, write or close) that failed,
so callers can tell a bad path from a full disk from a broken handle.
"""

import enum
import errno
import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class StoragePhase(enum.Enum):
    OPEN = "open"
    WRITE = "write"
    CLOSE = "close"


@dataclass(frozen=True)
class StorageError:
    """
    Why a save failed.

    Attributes:
        phase (StoragePhase): Step that failed
        reason (str): POSIX errno name such as ``"ENOENT"``, or
            ``"short_write"`` when not all bytes were written
        message (str): Human readable description
        exception (Optional[OSError]): Underlying exception, if any
    """
    phase: StoragePhase
    reason: str
    message: str
    exception: Optional[OSError] = None


@dataclass(frozen=True)
class SaveResult:
    path: Optional[str] = None
    error: Optional[StorageError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the saved path or raise the failure as an OSError."""
        if self.error is None:
            return self.path
        if self.error.exception is not None:
            raise self.error.exception
        raise OSError(errno.EIO, self.error.message)


def _error(phase: StoragePhase, exc: OSError) -> StorageError:
    reason = errno.errorcode.get(exc.errno, "EIO") if exc.errno else "EIO"
    return StorageError(phase, reason, f"{phase.value} failed: {exc}", exc)


def write_file(path, data: bytes, opener: Callable = open) -> SaveResult:
    """
    Write ``data`` to ``path``, replacing any existing file.

    The handle is closed on every path out of this function. When both the
    write and the close fail, the write error is reported.

    Args:
        path: File system path
        data (bytes): Content to write
        opener (Callable): ``open``-compatible callable

    Returns:
        SaveResult: ``path`` on success, ``error`` on failure
    """
    try:
        handle = opener(path, "wb")
    except (OSError, ValueError) as exc:
        logger.warning("Could not open %s for writing: %s", path, exc)
        if not isinstance(exc, OSError):
            # open() rejects malformed paths (embedded NUL) with ValueError.
            exc = OSError(errno.EINVAL, str(exc))
        return SaveResult(error=_error(StoragePhase.OPEN, exc))

    failure = None
    try:
        written = handle.write(data)
        if written is not None and written < len(data):
            failure = StorageError(
                StoragePhase.WRITE,
                "short_write",
                f"write failed: {written} of {len(data)} bytes written",
            )
    except OSError as exc:
        failure = _error(StoragePhase.WRITE, exc)
    finally:
        try:
            handle.close()
        except OSError as exc:
            if failure is None:
                failure = _error(StoragePhase.CLOSE, exc)
            else:
                logger.debug("Ignoring close error after failed write to %s: %s", path, exc)

    if failure is not None:
        logger.warning("Could not save %s: %s", path, failure.message)
        return SaveResult(error=failure)
    return SaveResult(path=path)
