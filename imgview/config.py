"""
Configuration loading and validation.

Handles YAML config parsing with environment variable expansion.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .actions.base import Action, parse_actions
from .info import DEFAULT_SECTIONS
from .shellcmd import DEFAULT_TIMEOUT

DEFAULT_KEYS: dict[str, dict[str, str]] = {
    "viewer": {
        "F1": "help",
        "Home": "first_file",
        "End": "last_file",
        "Left": "prev_file",
        "Right": "next_file",
        "Space": "next_file",
        "Delete": "skip_file",
        "r": "reload",
        "i": "info",
        "f": "fullscreen",
        "m": "mark",
        "Return": "mode gallery",
        "e": "exec echo %",
        "E": "exec_marked echo %",
        "Escape": "exit",
        "q": "exit",
    },
    "gallery": {
        "F1": "help",
        "Home": "first_file",
        "End": "last_file",
        "Left": "prev_file",
        "Right": "next_file",
        "m": "mark",
        "Return": "mode viewer",
        "E": "exec_marked echo %",
        "Escape": "exit",
        "q": "exit",
    },
}


@dataclass
class GeneralConfig:
    """Application-wide settings."""
    mode: str = "viewer"
    exec_timeout: float = DEFAULT_TIMEOUT
    max_status: int = 60


@dataclass
class InfoConfig:
    """Info bar settings."""
    sections: list[str] = field(default_factory=lambda: list(DEFAULT_SECTIONS))


@dataclass
class Config:
    """Root configuration object."""
    general: GeneralConfig
    info: InfoConfig
    keys: dict[str, dict[str, list[Action]]]  # mode name -> key -> actions


def expand_env_vars(value: str) -> str:
    """Expand environment variables in a string.

    Supports ${VAR} syntax.
    """
    pattern = re.compile(r'\$\{([^}]+)\}')

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return pattern.sub(replacer, value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Recursively expand environment variables in a data structure."""
    if isinstance(obj, str):
        return expand_env_vars(obj)
    elif isinstance(obj, dict):
        return {k: expand_env_vars_recursive(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars_recursive(item) for item in obj]
    return obj


def parse_keybinds(mode: str, data: dict[str, Any]) -> dict[str, list[Action]]:
    """Parse key -> action string bindings of a mode."""
    keybinds = {}
    for key, value in data.items():
        if value is None:
            continue
        try:
            actions = parse_actions(str(value))
        except ValueError as e:
            raise ValueError(f"Invalid binding {mode}.{key}: {e}") from None
        if actions:
            keybinds[str(key)] = actions
    return keybinds


def parse_section_name(value: Any) -> str:
    """Get an info section name, undoing YAML's `off` -> False conversion."""
    if value is False:
        return "off"
    return str(value)


def parse_general(data: dict[str, Any]) -> GeneralConfig:
    """Parse the general section."""
    general = GeneralConfig(
        mode=data.get("mode", "viewer"),
        exec_timeout=float(data.get("exec_timeout", DEFAULT_TIMEOUT)),
        max_status=int(data.get("max_status", 60)),
    )
    if general.exec_timeout <= 0:
        raise ValueError(f"exec_timeout must be positive: {general.exec_timeout}")
    if general.max_status <= 0:
        raise ValueError(f"max_status must be positive: {general.max_status}")
    return general


def parse_config(raw: dict[str, Any] | None) -> Config:
    """Build a Config from raw (already loaded) data, on top of the defaults.

    Environment variables are expanded everywhere except in key bindings:
    those are left for the shell to expand when a command runs.
    """
    raw = raw or {}
    raw_keys = raw.get("keys") or {}
    settings = expand_env_vars_recursive({k: v for k, v in raw.items() if k != "keys"})

    general = parse_general(settings.get("general") or {})

    info_data = settings.get("info") or {}
    info = InfoConfig(sections=[
        parse_section_name(name) for name in info_data.get("sections") or DEFAULT_SECTIONS
    ])

    # User bindings override the defaults key by key
    keys: dict[str, dict[str, list[Action]]] = {}
    for mode in sorted(set(DEFAULT_KEYS) | set(raw_keys)):
        merged = dict(DEFAULT_KEYS.get(mode, {}))
        merged.update(raw_keys.get(mode) or {})
        keys[mode] = parse_keybinds(mode, merged)

    return Config(general=general, info=info, keys=keys)


def load_config(path: Path | None) -> Config:
    """Load configuration from a YAML file, falling back to defaults."""
    if path is None or not path.exists():
        return parse_config(None)

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Invalid config format in {path}")

    return parse_config(raw)
