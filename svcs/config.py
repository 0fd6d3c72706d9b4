"""SVCS repository configuration helpers.

Reads and writes ``vcs/config.toml``, the local repository configuration.

The config file supports:
- ``[user] name`` — the author recorded in every new commit-log entry.

Repositories created by earlier releases keep the username as the whole
content of ``vcs/config.txt``; it is still honoured when ``config.toml``
does not set a name.
"""
from __future__ import annotations

import logging
import pathlib
import tomllib

from svcs._repo import RepositoryHandle

logger = logging.getLogger(__name__)


def _load_config(config_path: pathlib.Path) -> dict[str, object]:
    """Load and parse config.toml; return empty dict if absent or unreadable."""
    if not config_path.is_file():
        return {}
    try:
        with config_path.open("rb") as fh:
            return tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("⚠️ Failed to parse %s: %s", config_path, exc)
        return {}


_TOML_ESCAPES = {"\\": "\\\\", "\"": "\\\"", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _escape_toml_string(value: str) -> str:
    """Escape *value* for use inside a TOML basic string."""
    out: list[str] = []
    for ch in value:
        if ch in _TOML_ESCAPES:
            out.append(_TOML_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


def _dump_toml(data: dict[str, object]) -> str:
    """Serialize a one-level TOML dict (tables of scalar values) to text.

    The ``[user]`` section is always written first so the file is stable.
    """
    lines: list[str] = []

    def _write_table(heading: str, mapping: dict[str, object]) -> None:
        lines.append(f"[{heading}]")
        for key, val in mapping.items():
            if isinstance(val, bool):
                lines.append(f"{key} = {'true' if val else 'false'}")
            elif isinstance(val, (int, float)):
                lines.append(f"{key} = {val!r}")
            else:
                escaped = _escape_toml_string(str(val))
                lines.append(f'{key} = "{escaped}"')
        lines.append("")

    user_section = data.get("user")
    if isinstance(user_section, dict):
        _write_table("user", user_section)

    for key, val in data.items():
        if key == "user":
            continue
        if isinstance(val, dict):
            _write_table(key, val)

    return "\n".join(lines)


def get_username(repo: RepositoryHandle) -> str:
    """Return the configured username, or ``""`` when none is set."""
    data = _load_config(repo.config_path)
    user_section = data.get("user", {})
    name: object = user_section.get("name", "") if isinstance(user_section, dict) else ""
    if isinstance(name, str) and name:
        return name

    legacy = repo.legacy_config_path
    if legacy.is_file():
        legacy_name = legacy.read_text(encoding="utf-8")
        if legacy_name:
            logger.debug("⚠️ Using legacy username from %s", legacy)
            return legacy_name
    return ""


def set_username(repo: RepositoryHandle, name: str) -> None:
    """Write ``[user] name = "<name>"``, preserving other sections."""
    config_path = repo.config_path
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _load_config(config_path)
    user_section = data.get("user")
    if not isinstance(user_section, dict):
        user_section = {}
        data["user"] = user_section
    user_section["name"] = name

    config_path.write_text(_dump_toml(data), encoding="utf-8")
    logger.info("✅ Username set to %r", name)
