from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore[import]

logger = logging.getLogger(__name__)


def load_yaml_dict(filename) -> Dict[str, Any]:
    """
    Load a YAML file as a top-level dict with common error handling.

    - On missing file or parse error, returns {} and logs a warning.
    - If the top-level object is not a mapping, returns {} with a warning.
    """
    path = Path(filename)

    if not path.exists():
        logger.warning("YAML file '%s' not found", path)
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("failed to read YAML file '%s': %s", path, e)
        return {}

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("failed to parse YAML file '%s': %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("YAML file '%s' does not contain a mapping at top level.", path)
        return {}

    return data
