#!/usr/bin/env python3
# simplemenu/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: Startup pipeline with optional Linux-style [  OK  ] / [FAILED] lines.
- BootState: Dataclass containing config, logger, root registry, session and dispatcher.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
