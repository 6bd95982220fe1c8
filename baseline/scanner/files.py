from typing import Dict


def parse_kv_config(path: str) -> Dict[str, str]:
    """
    Parse a "KEY  VALUE" style file (sshd_config, login.defs).

    Text after '#' is dropped, keys and values are trimmed and lowercased,
    and a later occurrence of a key overrides an earlier one. Raises OSError
    when the file cannot be opened.
    """
    result = {}
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            parts = line.split(None, 1)
            if len(parts) < 2:
                continue
            key = parts[0].strip().lower()
            value = parts[1].strip().lower()
            if key and value:
                result[key] = value
    return result
