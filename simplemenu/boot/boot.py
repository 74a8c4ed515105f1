#!/usr/bin/env python3
# simplemenu/boot/boot.py
from __future__ import annotations
"""
Startup pipeline for simple-menu.

Order:
- Configuration (ConfigError aborts startup).
- Console and logging.
- Menu tree (DuplicateAliasError aborts startup).
- Session and dispatcher.

Linux-style [  OK  ] / [FAILED] lines are printed only when SHOW_BOOT_LOG is set.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional
import logging
import platform

from simplemenu.commands import CommandRegistry
from simplemenu.config import AppConfig, load_config
from simplemenu.interface import Dispatcher, Preferences, Session
from simplemenu.menus import build_root_registry
from simplemenu.ui import colorize, enable_windows_vt, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    root: CommandRegistry
    session: Session
    dispatcher: Dispatcher


def _report(label: str, ok: bool, detail: str = "") -> None:
    if ok:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    else:
        print_line(colorize(f"[FAILED] {label} ({detail})", "red"))


def _step(label: str, fn: Callable[[], Any], *, show: bool = True) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        if show:
            _report(label, False, f"{type(exc).__name__}: {exc}")
        raise
    if show:
        _report(label, True)
    return out


def _init_logging(config: AppConfig) -> logging.Logger:
    if config.log_file_path is not None:
        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)
    return init_logger(
        "simplemenu",
        level=getattr(logging, config.log_level),
        logfile=config.log_file_path,
    )


def boot_sequence(
    base: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BootState:
    # ---------- config ----------
    # loaded before anything is printed since it decides whether to print
    config = load_config(base, environ)
    show = config.show_boot_log
    if show:
        _report("Load configuration", True)

    # ---------- console + logging ----------
    _step("Enable ANSI sequences", enable_windows_vt, show=show)
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        show=show,
    )
    logger = _step("Initialize logger", lambda: _init_logging(config), show=show)
    logger.debug("Configuration loaded: workspace=%s", config.workspace_path)

    # ---------- menus ----------
    root = _step("Build menu tree", build_root_registry, show=show)

    # ---------- session ----------
    session = Session(
        app_name=config.app_name,
        workspace=config.workspace_path,
        preferences=Preferences(
            colored_prompt=config.colored_prompt,
            show_suggestions=config.show_suggestions,
            max_list_items=config.max_list_items,
        ),
        history_size=config.history_size,
    )
    dispatcher = _step("Create dispatcher", lambda: Dispatcher(root, session), show=show)
    _step("Boot complete", lambda: None, show=show)

    return BootState(
        config=config,
        logger=logger,
        root=root,
        session=session,
        dispatcher=dispatcher,
    )
