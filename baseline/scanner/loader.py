from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .config_loader import load_yaml_dict
from .types import CheckRule, ThresholdRule

logger = logging.getLogger(__name__)

RULES_DIR = Path(__file__).resolve().parent.parent / "rules"
SSH_RULES_FILE = RULES_DIR / "ssh.yml"
POLICY_RULES_FILE = RULES_DIR / "login_defs.yml"

THRESHOLD_KINDS = ("minimum", "maximum")


def load_ssh_rules(path: Optional[str] = None) -> Tuple[Optional[str], List[CheckRule]]:
    """Return (target config file, rules) from an SSH rule file."""
    data = load_yaml_dict(path or SSH_RULES_FILE)
    rules = []

    for c in data.get("checks") or []:
        try:
            rules.append(CheckRule(
                key=str(c["key"]).lower(),
                risky_value=str(c["risky"]).lower(),
                hint=str(c.get("hint", "")),
                why=str(c.get("why", "")),
            ))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("ignoring malformed SSH rule %r: %s", c, e)

    return data.get("file"), rules


def load_policy_rules(path: Optional[str] = None) -> Tuple[Optional[str], List[ThresholdRule]]:
    """Return (target config file, rules) from a password-policy rule file."""
    data = load_yaml_dict(path or POLICY_RULES_FILE)
    rules = []

    for c in data.get("checks") or []:
        try:
            kind = str(c["kind"])
            if kind not in THRESHOLD_KINDS:
                raise ValueError(f"unknown kind '{kind}'")
            rules.append(ThresholdRule(
                key=str(c["key"]),
                kind=kind,
                ok=int(c["ok"]),
                check=int(c["check"]),
            ))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("ignoring malformed policy rule %r: %s", c, e)

    return data.get("file"), rules
