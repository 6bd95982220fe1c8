from __future__ import annotations

import logging
import os
import re
from typing import Dict, List, Optional

from .files import parse_kv_config
from .types import (
    STATUS_CHECK,
    STATUS_OK,
    STATUS_RISK,
    STATUS_UNKNOWN,
    UNKNOWN_VALUE,
    CheckResult,
    CheckRule,
    SectionResult,
    ThresholdRule,
)

logger = logging.getLogger(__name__)

SSH_SECTION = "SSH Configuration"
POLICY_SECTION = "Password Policy"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def leading_int(value: str) -> Optional[int]:
    """Integer at the start of value ("12 # min" -> 12), or None.

    Values outside the 32-bit signed range are unusable and give None.
    """
    m = _LEADING_INT.match(value)
    if not m:
        return None
    number = int(m.group(1))
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def _read_settings(section: SectionResult) -> Optional[Dict[str, str]]:
    try:
        return parse_kv_config(section.config_path)
    except IsADirectoryError:
        # opens, but holds no settings
        return {}
    except OSError as e:
        logger.debug("could not read %s: %s", section.config_path, e)
        return None


def check_ssh(config_path: str, ssh_dir: str, rules: List[CheckRule]) -> SectionResult:
    section = SectionResult(name=SSH_SECTION, config_path=config_path)

    settings = _read_settings(section)
    if settings is None:
        if not os.path.exists(ssh_dir):
            section.problem = (
                f"{ssh_dir} not found. SSH server may not be installed on this system."
            )
        else:
            section.problem = f"Could not read {config_path}."
            section.detail = (
                "Likely causes: ssh-server not installed, file does not exist, "
                "or permissions restricted."
            )
        return section

    if not settings:
        section.problem = f"{config_path} was readable, but no settings were parsed."
        return section

    for rule in rules:
        current = settings.get(rule.key, UNKNOWN_VALUE)

        if current == rule.risky_value:
            result = CheckResult(rule.key, current, STATUS_RISK, why=rule.why, hint=rule.hint)
        elif current == UNKNOWN_VALUE:
            result = CheckResult(
                rule.key, current, STATUS_UNKNOWN,
                note="Setting not present; system defaults may apply.",
            )
        else:
            result = CheckResult(rule.key, current, STATUS_OK)

        section.results.append(result)

    return section


def ssh_summary(section: SectionResult) -> str:
    return "LOW" if section.risk_count == 0 else "CHECK SETTINGS"


def classify_threshold(rule: ThresholdRule, value: Optional[int]) -> str:
    if value is None:
        return STATUS_UNKNOWN

    if rule.kind == "minimum":
        if value >= rule.ok:
            return STATUS_OK
        if value >= rule.check:
            return STATUS_CHECK
        if value >= 0:
            return STATUS_RISK
        return STATUS_UNKNOWN

    # maximum: zero or negative values carry no meaning
    if 0 < value <= rule.ok:
        return STATUS_OK
    if rule.ok < value <= rule.check:
        return STATUS_CHECK
    if value > rule.check:
        return STATUS_RISK
    return STATUS_UNKNOWN


def check_password_policy(config_path: str, rules: List[ThresholdRule]) -> SectionResult:
    section = SectionResult(name=POLICY_SECTION, config_path=config_path)

    settings = _read_settings(section)
    if settings is None:
        section.problem = (
            f"Could not read {config_path} (file missing or permissions restricted)."
        )
        return section

    if not settings:
        section.problem = f"{config_path} was readable, but no settings were parsed."
        return section

    for rule in rules:
        current = settings.get(rule.key.lower(), UNKNOWN_VALUE)
        if current == UNKNOWN_VALUE:
            status = STATUS_UNKNOWN
        else:
            status = classify_threshold(rule, leading_int(current))
        section.results.append(CheckResult(rule.key, current, status))
        section.recommendations.append(recommendation(rule))

    return section


def recommendation(rule: ThresholdRule) -> str:
    if rule.kind == "minimum":
        return f"Prefer {rule.key} >= {rule.ok} for stronger baseline policy."
    return f"Prefer {rule.key} around {rule.ok} (or organization standard)."
