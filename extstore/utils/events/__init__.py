"""Module: __init__.py.

Author: Michael Economou
Date: 2026-02-02

Infrastructure - Event System.

Pure Python signal implementation used to wire store widgets and the code
driving them (installers, selection handlers) without QObject subclasses.
"""

from extstore.utils.events.signal import Signal, blocked_signals

__all__ = ["Signal", "blocked_signals"]
