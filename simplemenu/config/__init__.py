#!/usr/bin/env python3
# simplemenu/config/__init__.py
from __future__ import annotations

from .config import DEFAULTS, ENV_PREFIX, AppConfig, load_config

__all__ = ["DEFAULTS", "ENV_PREFIX", "AppConfig", "load_config"]
