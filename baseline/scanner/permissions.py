from __future__ import annotations

import logging
import os
import stat
from typing import Iterable, List, Optional

from .types import (
    ABORTED,
    SKIPPED,
    REASON_ITERATION_FAULT,
    REASON_NOT_A_DIRECTORY,
    REASON_PERMISSION_DENIED,
    REASON_STAT_FAILED,
    REASON_SYMLINK,
    REASON_UNREADABLE,
    REASON_VANISHED,
    EntryOutcome,
    Finding,
    RootScan,
)

logger = logging.getLogger(__name__)


class IterationFault(Exception):
    """A directory iterator failed to advance; the walk of the root stops."""

    def __init__(self, directory: str, cause: OSError):
        super().__init__(f"iteration failed in {directory}: {cause}")
        self.directory = directory
        self.cause = cause


def is_world_writable(entry_status: Optional[os.stat_result]) -> bool:
    """
    True iff the "others may write" bit is set.

    The status must come from lstat semantics. A missing status, or one
    without a mode, counts as not world-writable.
    """
    if entry_status is None:
        return False
    mode = getattr(entry_status, "st_mode", None)
    if mode is None:
        return False
    return bool(mode & stat.S_IWOTH)


def _skip(result: RootScan, path: str, reason: str) -> None:
    logger.debug("skipping %s (%s)", path, reason)
    result.skipped.append(EntryOutcome(path=path, status=SKIPPED, reason=reason))


def _visit(entry: os.DirEntry, result: RootScan) -> bool:
    """Classify one entry. Returns True when the walk should descend into it."""
    try:
        st = entry.stat(follow_symlinks=False)
    except FileNotFoundError:
        _skip(result, entry.path, REASON_VANISHED)
        return False
    except OSError:
        _skip(result, entry.path, REASON_STAT_FAILED)
        return False

    # Links are never reported and never followed, whatever they point at.
    if stat.S_ISLNK(st.st_mode):
        _skip(result, entry.path, REASON_SYMLINK)
        return False

    result.entries_visited += 1
    is_dir = stat.S_ISDIR(st.st_mode)
    if is_world_writable(st):
        result.findings.append(Finding(path=entry.path, is_dir=is_dir))
    return is_dir


def _scan_directory(directory: str, result: RootScan) -> List[str]:
    """
    Visit every entry of one directory and return its subdirectories.

    The directory handle is closed before this returns, so no handle stays
    open while the caller works through the subdirectories.
    """
    subdirs: List[str] = []
    try:
        handle = os.scandir(directory)
    except PermissionError:
        _skip(result, directory, REASON_PERMISSION_DENIED)
        return subdirs
    except NotADirectoryError:
        _skip(result, directory, REASON_NOT_A_DIRECTORY)
        return subdirs
    except FileNotFoundError:
        _skip(result, directory, REASON_VANISHED)
        return subdirs
    except OSError:
        _skip(result, directory, REASON_UNREADABLE)
        return subdirs

    with handle as entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                raise IterationFault(directory, e) from e

            if _visit(entry, result):
                subdirs.append(entry.path)

    return subdirs


def scan_root(root) -> RootScan:
    """
    Walk one root depth-first and collect its world-writable entries.

    Never raises for filesystem problems: a missing root gives an empty
    result, unreadable entries and subtrees are recorded as skipped, and an
    iteration fault stops the walk with complete=False.
    """
    root = os.fspath(root)
    result = RootScan(root=root)

    if not os.path.exists(root):
        result.exists = False
        return result

    pending = [root]
    try:
        while pending:
            directory = pending.pop()
            subdirs = _scan_directory(directory, result)
            # reversed so the first subdirectory is walked next
            pending.extend(reversed(subdirs))
    except IterationFault as e:
        logger.warning("scan of %s stopped early: %s", root, e)
        result.complete = False
        result.skipped.append(
            EntryOutcome(path=e.directory, status=ABORTED, reason=REASON_ITERATION_FAULT)
        )

    return result


def scan(root) -> List[Finding]:
    return scan_root(root).findings


def scan_roots(roots: Iterable) -> List[RootScan]:
    return [scan_root(r) for r in roots]


def findings_of(scans: Iterable[RootScan]) -> List[Finding]:
    findings: List[Finding] = []
    for s in scans:
        findings.extend(s.findings)
    return findings


def scan_all(roots: Iterable) -> List[Finding]:
    """Findings for every root, concatenated in root order."""
    return findings_of(scan_roots(roots))
