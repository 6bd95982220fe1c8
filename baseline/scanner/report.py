from __future__ import annotations

from typing import List

from .checks import ssh_summary
from .types import (
    STATUS_OK,
    STATUS_RISK,
    AuditReport,
    SectionResult,
)

TITLE = "Linux Security Baseline Report"


class ReportRenderer:
    def __init__(self, color: bool = False):
        self.color = color


    def colorize(self, status):
        if not self.color:
            return status

        GREEN = "\033[92m"
        RED = "\033[91m"
        YELLOW = "\033[93m"
        RESET = "\033[0m"

        if status == STATUS_OK:
            return GREEN + status + RESET
        elif status == STATUS_RISK:
            return RED + status + RESET
        else:
            return YELLOW + status + RESET


    def tag(self, status):
        return f"[{self.colorize(status)}]"


    def render(self, report: AuditReport) -> str:
        lines: List[str] = []
        lines += self.header()
        lines += self.permissions_section(report)
        lines += self.ssh_section(report.ssh)
        lines += self.password_policy_section(report.password_policy)
        lines += ["", "Done."]
        return "\n".join(lines) + "\n"


    def header(self) -> List[str]:
        return [TITLE, "=" * len(TITLE), ""]


    def permissions_section(self, report: AuditReport) -> List[str]:
        lines = ["[File Permissions] World-writable paths scan", "Scanned roots:"]
        for root in report.roots:
            lines.append(f"  - {root}")
        for root in report.incomplete_roots:
            lines.append(
                f"[!] Scan of {root} stopped early; results for this root may be incomplete."
            )
        lines.append("")

        if not report.findings:
            lines.append(
                f"{self.tag(STATUS_OK)} No world-writable files/directories found in the scanned roots."
            )
            return lines

        lines.append(f"[!] {STATUS_RISK}: World-writable paths found: {len(report.findings)}")
        for f in report.findings:
            kind = "[DIR]  " if f.is_dir else "[FILE] "
            lines.append(f"  - {kind}{f.path}")

        lines += [
            "",
            "Recommendation:",
            "  Review these paths and remove world-write permission where possible (chmod o-w ...).",
        ]
        return lines


    def _problem(self, section: SectionResult) -> List[str]:
        lines = [f"[!] {section.problem}"]
        if section.detail:
            lines.append(f"    {section.detail}")
        return lines


    def ssh_section(self, section: SectionResult) -> List[str]:
        lines = ["", "[SSH Configuration] Basic hardening checks"]
        if section.problem:
            return lines + self._problem(section)

        for r in section.results:
            lines.append(f"  - {r.key}: {r.current}  {self.tag(r.status)}")
            if r.why:
                lines.append(f"      Why: {r.why}")
            if r.hint:
                lines.append(f"      Fix: {r.hint}")
            if r.note:
                lines.append(f"      Note: {r.note}")

        lines += ["", f"SSH Risk Summary: {ssh_summary(section)}"]
        return lines


    def password_policy_section(self, section: SectionResult) -> List[str]:
        lines = ["", "[Password Policy] login.defs sanity checks"]
        if section.problem:
            return lines + self._problem(section)

        for r in section.results:
            lines.append(f"  - {r.key}: {r.current}  {self.tag(r.status)}")

        if section.recommendations:
            lines += ["", "Recommendations:"]
            for text in section.recommendations:
                lines.append(f"  - {text}")
        return lines

