#!/usr/bin/env python3
# simplemenu/config/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only, Python 3.11+).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, config.ini, config.json, config.toml
  3) Environment variables prefixed with SIMPLE_MENU_

Validation:
  - WORKSPACE_PATH: normalized path (no creation here)
  - LOG_FILE_PATH: None or path, relative paths resolved under the workspace
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - APP_NAME: non-empty str
  - COLORED_PROMPT / SHOW_SUGGESTIONS / SHOW_BANNER / ENABLE_COMPLETION / SHOW_BOOT_LOG: bool
  - MAX_LIST_ITEMS: int >= 1
  - HISTORY_SIZE: int >= 0
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import configparser
import json
import os
import re
import tomllib  # stdlib in 3.11+

from simplemenu.errors import ConfigError

ENV_PREFIX = "SIMPLE_MENU_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "WORKSPACE_PATH": ".",
    "LOG_FILE_PATH": None,
    "LOG_LEVEL": "WARNING",
    "APP_NAME": "simple-menu",
    "COLORED_PROMPT": True,
    "SHOW_SUGGESTIONS": True,
    "SHOW_BANNER": True,
    "ENABLE_COMPLETION": True,
    "SHOW_BOOT_LOG": False,
    "MAX_LIST_ITEMS": 50,
    "HISTORY_SIZE": 100,
}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    workspace_path: Path
    log_file_path: Path | None
    log_level: str

    app_name: str
    colored_prompt: bool
    show_suggestions: bool
    show_banner: bool
    enable_completion: bool
    show_boot_log: bool

    max_list_items: int
    history_size: int

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    try:
        cfg.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigError(f"Malformed {path.name}: {exc}") from exc
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Malformed {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a JSON object")
    return data


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed {path.name}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'ui': {'show_banner': true}} -> {'UI_SHOW_BANNER': True}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path) -> list[Path]:
    return [
        base / ".env",
        base / "config.ini",
        base / "config.json",
        base / "config.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _as_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigError(f"{key} expects a boolean, got: {val!r}")


def _as_int(key: str, val: Any, *, minimum: int) -> int:
    if isinstance(val, bool):
        raise ConfigError(f"{key} expects an integer, got: {val!r}")
    if isinstance(val, int):
        number = val
    else:
        try:
            number = int(str(val).strip())
        except ValueError as exc:
            raise ConfigError(f"{key} expects an integer, got: {val!r}") from exc
    if number < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {number}")
    return number


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val)
    if lv is None:
        return DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    if up not in _LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def _expand(value: Any) -> Path:
    # expand both ~ and env vars
    return Path(os.path.expandvars(os.path.expanduser(str(value))))


def _resolve_under(base: Path, value: Any) -> Path | None:
    """Resolve a config path relative to `base` (workspace) when not absolute."""
    if _as_opt_str(value) is None:
        return None
    p = _expand(value)
    return p if p.is_absolute() else (base / p).resolve()


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- merge & load ----------

def _merge_sources(base: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if not file.is_file():
            continue
        if file.suffix == ".env" or file.name == ".env":
            merged.update(_normalize_keys(_load_env_file(file)))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(_flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(_flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only take prefixed keys
    env_overrides = {
        k[len(ENV_PREFIX):]: v for k, v in environ.items()
        if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX)
    }
    merged.update(env_overrides)
    return merged


# ---------- validation ----------

def _validate_and_build(config: dict[str, Any], base: Path) -> AppConfig:
    # workspace base: if relative, it's relative to the directory config was read from
    ws_base = _expand(config.get("WORKSPACE_PATH") or DEFAULTS["WORKSPACE_PATH"])
    if not ws_base.is_absolute():
        ws_base = base / ws_base
    workspace_path = ws_base.resolve()

    log_file_path = _resolve_under(workspace_path, config.get("LOG_FILE_PATH"))
    log_level = _as_log_level(config.get("LOG_LEVEL"))

    app_name = _as_opt_str(config.get("APP_NAME"))
    if app_name is None or not app_name.strip():
        raise ConfigError("APP_NAME cannot be empty")

    flags = {
        key: _as_bool(key, config.get(key, DEFAULTS[key]))
        for key in ("COLORED_PROMPT", "SHOW_SUGGESTIONS", "SHOW_BANNER",
                    "ENABLE_COMPLETION", "SHOW_BOOT_LOG")
    }
    max_list_items = _as_int("MAX_LIST_ITEMS", config.get("MAX_LIST_ITEMS"), minimum=1)
    history_size = _as_int("HISTORY_SIZE", config.get("HISTORY_SIZE"), minimum=0)

    # Carry through extra keys
    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        workspace_path=workspace_path,
        log_file_path=log_file_path,
        log_level=log_level,
        app_name=app_name.strip(),
        colored_prompt=flags["COLORED_PROMPT"],
        show_suggestions=flags["SHOW_SUGGESTIONS"],
        show_banner=flags["SHOW_BANNER"],
        enable_completion=flags["ENABLE_COMPLETION"],
        show_boot_log=flags["SHOW_BOOT_LOG"],
        max_list_items=max_list_items,
        history_size=history_size,
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    base: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects (no directory creation).

    Raises ConfigError for malformed files or invalid values.
    """
    base_path = Path(base) if base is not None else Path.cwd()
    env = os.environ if environ is None else environ
    raw = _merge_sources(base_path, env)
    return _validate_and_build(raw, base_path)
