"""
:Description: Provides enumerated types used by the change tracker.
"""

from __future__ import annotations

from enum import StrEnum


class TrackerState(StrEnum):
    """
    The two states a `ChangeTracker` can be in.
    """

    CLEAN = "clean"  # No mutable access since construction or the last reset
    DIRTY = "dirty"  # A mutable-access path has been taken
