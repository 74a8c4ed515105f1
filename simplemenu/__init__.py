#!/usr/bin/env python3
# simplemenu/__init__.py
from __future__ import annotations
"""
simple-menu package bootstrap.

Avoid eager imports that trigger package initialization cascades: the
interface modules import `__version__` from here.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
