from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


# ---- Entry outcome states ---- #
INCLUDED = "included"
SKIPPED = "skipped"
ABORTED = "aborted"

# ---- Skip / abort reasons ---- #
REASON_SYMLINK = "symlink"
REASON_VANISHED = "vanished"
REASON_STAT_FAILED = "stat-failed"
REASON_PERMISSION_DENIED = "permission-denied"
REASON_UNREADABLE = "unreadable"
REASON_NOT_A_DIRECTORY = "not-a-directory"
REASON_ITERATION_FAULT = "iteration-fault"

# ---- Check statuses ---- #
STATUS_OK = "OK"
STATUS_RISK = "RISK"
STATUS_CHECK = "CHECK"
STATUS_UNKNOWN = "UNKNOWN"

UNKNOWN_VALUE = "unknown"


@dataclass(frozen=True)
class Finding:
    path: str
    is_dir: bool


@dataclass(frozen=True)
class EntryOutcome:
    """
    What the walk decided for a single entry.

    Only skipped and aborted outcomes are kept on a RootScan; included entries
    show up as findings (when world-writable) and in the visited counter.
    """
    path: str
    status: str     # INCLUDED, SKIPPED or ABORTED
    reason: Optional[str] = None


@dataclass
class RootScan:
    root: str
    exists: bool = True
    findings: List[Finding] = field(default_factory=list)
    skipped: List[EntryOutcome] = field(default_factory=list)
    complete: bool = True   # False when an iteration fault stopped the walk
    entries_visited: int = 0

    def skip_reasons(self) -> List[str]:
        return [o.reason for o in self.skipped if o.reason]


@dataclass
class CheckRule:
    key: str            # lowercased setting name, e.g. "permitrootlogin"
    risky_value: str
    hint: str
    why: str


@dataclass
class ThresholdRule:
    key: str            # setting name as displayed, e.g. "PASS_MIN_LEN"
    kind: str           # "minimum" or "maximum"
    ok: int
    check: int


@dataclass
class CheckResult:
    key: str
    current: str        # parsed value, or UNKNOWN_VALUE when not present
    status: str
    why: Optional[str] = None
    hint: Optional[str] = None
    note: Optional[str] = None


@dataclass
class SectionResult:
    name: str
    config_path: str
    results: List[CheckResult] = field(default_factory=list)
    problem: Optional[str] = None   # set when the file could not be used at all
    detail: Optional[str] = None
    recommendations: List[str] = field(default_factory=list)

    @property
    def risk_count(self) -> int:
        return sum(1 for r in self.results if r.status == STATUS_RISK)


@dataclass
class AuditReport:
    roots: List[str]
    root_scans: List[RootScan]
    findings: List[Finding]
    ssh: SectionResult
    password_policy: SectionResult

    @property
    def incomplete_roots(self) -> List[str]:
        return [s.root for s in self.root_scans if not s.complete]
