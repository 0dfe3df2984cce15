"""
:Description: Provides public types and type aliases used by all modules.
"""

from __future__ import annotations

from typing import TypeVar

# Generic type of the value stored in a tracker
T = TypeVar("T")
