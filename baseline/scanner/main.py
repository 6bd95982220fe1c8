from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence

from .checks import check_password_policy, check_ssh
from .config_loader import load_yaml_dict
from .config_paths import DEFAULT_ROOTS, LOGIN_DEFS, SSH_CONFIG, SSH_DIR
from .loader import load_policy_rules, load_ssh_rules
from .permissions import findings_of, scan_roots
from .types import AuditReport, CheckRule, ThresholdRule

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("roots", "ssh_config", "ssh_dir", "login_defs")


@dataclass
class AuditConfig:
    roots: List[str] = field(default_factory=lambda: list(DEFAULT_ROOTS))
    ssh_config: str = SSH_CONFIG
    ssh_dir: str = SSH_DIR
    login_defs: str = LOGIN_DEFS
    ssh_rules: List[CheckRule] = field(default_factory=list)
    policy_rules: List[ThresholdRule] = field(default_factory=list)


def default_config() -> AuditConfig:
    """Default roots and paths with the packaged rule tables."""
    ssh_file, ssh_rules = load_ssh_rules()
    policy_file, policy_rules = load_policy_rules()
    return AuditConfig(
        ssh_config=ssh_file or SSH_CONFIG,
        login_defs=policy_file or LOGIN_DEFS,
        ssh_rules=ssh_rules,
        policy_rules=policy_rules,
    )


def apply_overrides(config: AuditConfig, overrides: Dict[str, Any]) -> AuditConfig:
    """
    Return a copy of config with recognised keys replaced.

    Unknown keys and values of the wrong shape are ignored with a warning.
    """
    changes: Dict[str, Any] = {}

    for key, value in overrides.items():
        if key not in CONFIG_KEYS:
            logger.warning("ignoring unknown config key '%s'", key)
            continue
        if value is None:
            continue
        if key == "roots":
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, (list, tuple)):
                logger.warning("config key 'roots' must be a list of paths")
                continue
            changes["roots"] = [str(v) for v in value]
        else:
            changes[key] = str(value)

    return replace(config, **changes)


def load_config(path: Optional[str] = None, base: Optional[AuditConfig] = None) -> AuditConfig:
    """Defaults (or base) overlaid with the keys of an optional YAML file."""
    config = base or default_config()
    if path is None:
        return config
    return apply_overrides(config, load_yaml_dict(path))


def run_audit(config: AuditConfig) -> AuditReport:
    roots: Sequence[str] = list(config.roots)

    root_scans = scan_roots(roots)
    for s in root_scans:
        logger.debug(
            "%s: %d entries visited, %d findings, %d skipped",
            s.root, s.entries_visited, len(s.findings), len(s.skipped),
        )

    return AuditReport(
        roots=list(roots),
        root_scans=root_scans,
        findings=findings_of(root_scans),
        ssh=check_ssh(config.ssh_config, config.ssh_dir, config.ssh_rules),
        password_policy=check_password_policy(config.login_defs, config.policy_rules),
    )
