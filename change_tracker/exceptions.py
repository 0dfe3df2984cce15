"""
:Description: Provides exceptions thrown by the change tracker.
"""

from __future__ import annotations


class ChangeTrackerException(Exception):
    """
    Base exception for all other change tracking exceptions. Should not be raised directly.
    """


class ExtractedTrackerError(ChangeTrackerException):
    """
    The value has already been extracted from this tracker, so the tracker can no longer be used.
    """

    def __init__(self, message: str = ""):
        """
        Constructs an ExtractedTrackerError Exception.

        :param message: (Optional) String description of the issue encountered.
        """
        self.message = message if len(message) else "The tracked value has already been extracted."
        super().__init__(self.message)
