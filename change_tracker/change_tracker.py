"""
:Description: Provides `ChangeTracker`, a wrapper that tracks whether the value it contains has been accessed for
                mutation since it was created or since the last reset.
"""

from __future__ import annotations

from typing import Generic

from change_tracker.enums import TrackerState
from change_tracker.exceptions import ExtractedTrackerError
from change_tracker.types import T


class MutableView(Generic[T]):
    """
    A reference into a `ChangeTracker`'s value. Views are handed out by `ChangeTracker.write()` and
    `ChangeTracker.mutate_silently()`.

    Reading or assigning `value` never touches the dirty flag of the tracker. The flag is determined by which method
    produced the view, at the moment the view was produced.
    """

    __slots__ = ("_tracker",)

    def __init__(self, tracker: ChangeTracker[T]):
        """
        Constructs a view into a tracker. This should only be called by `ChangeTracker`.

        :param tracker: Tracker that owns the value
        """
        self._tracker: ChangeTracker[T] = tracker

    @property
    def value(self) -> T:
        """
        :returns: The value currently stored in the tracker.
        """
        self._tracker._check_not_extracted()  # pylint: disable=protected-access
        return self._tracker._value  # pylint: disable=protected-access

    @value.setter
    def value(self, value: T) -> None:
        """
        Replaces the value stored in the tracker.

        :param value: New value to store
        """
        self._tracker._check_not_extracted()  # pylint: disable=protected-access
        self._tracker._value = value  # pylint: disable=protected-access

    def __repr__(self) -> str:
        """
        :returns: Debug string representation of the view
        """
        return f"MutableView({self._tracker!r})"


class ChangeTracker(Generic[T]):
    """
    Holds a single value and a dirty flag.

    Tracking is conservative: the flag is set when a mutable-access path (`write()`) is taken, regardless of whether
    the value is actually altered afterwards. No comparison against the prior value is ever made.

    Python has no move semantics, so `extract()` invalidates the tracker instead. Any further use of the tracker, or of
    a view obtained from it, raises `ExtractedTrackerError`.
    """

    __slots__ = ("_value", "_dirty", "_extracted")

    # Trackers compare by value and are mutable, so they cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: T, dirty: bool = False):
        """
        Constructs a tracker around a value. Prefer `create()` and `create_dirty()`.

        :param value: Value to track
        :param dirty: (Optional) Initial state of the dirty flag. Clean by default.
        """
        self._value: T = value
        self._dirty = dirty
        self._extracted = False

    @classmethod
    def create(cls, value: T) -> ChangeTracker[T]:
        """
        Constructs a clean tracker.

        :param value: Value to track
        :returns: A tracker that reports no change
        """
        return cls(value)

    @classmethod
    def create_dirty(cls, value: T) -> ChangeTracker[T]:
        """
        Constructs a tracker that already reports a change. Useful to guarantee that the value gets processed on first
        use.

        :param value: Value to track
        :returns: A tracker that reports a change
        """
        return cls(value, dirty=True)

    def _check_not_extracted(self) -> None:
        """
        :raises ExtractedTrackerError: If the value has been taken out of this tracker
        """
        if self._extracted:
            raise ExtractedTrackerError()

    def reset(self) -> None:
        """
        Marks the tracker as clean. The stored value is left untouched.
        """
        self._check_not_extracted()
        self._dirty = False

    def extract(self) -> T:
        """
        Takes the value out of the tracker, discarding the dirty flag. The tracker cannot be used afterwards.

        :returns: The stored value
        """
        self._check_not_extracted()
        value: T = self._value
        self._extracted = True
        # Drop the tracker's reference so that the caller is the sole owner of the value.
        del self._value
        return value

    def is_dirty(self) -> bool:
        """
        Indicates if a mutable-access path has been taken since construction or the last call to `reset()`.

        :returns: True if the tracker is dirty. False otherwise.
        """
        self._check_not_extracted()
        return self._dirty

    def state(self) -> TrackerState:
        """
        Named equivalent of `is_dirty()`.

        :returns: The current state of the tracker
        """
        return TrackerState.DIRTY if self.is_dirty() else TrackerState.CLEAN

    def read(self) -> T:
        """
        Returns the stored value without tripping change detection.

        NOTE: Python cannot provide a read-only view of an arbitrary object. Mutating the returned object in place goes
        unnoticed by the tracker; use `write()` for that.

        :returns: The stored value
        """
        self._check_not_extracted()
        return self._value

    @property
    def value(self) -> T:
        """
        Read-only property equivalent of `read()`.
        """
        return self.read()

    def write(self) -> MutableView[T]:
        """
        Marks the tracker as dirty and returns a view that can be used to modify the stored value. The flag is set by
        this call, even if the view is never used.

        :returns: A mutable view of the stored value
        """
        self._check_not_extracted()
        self._dirty = True
        return MutableView(self)

    def mutate_silently(self) -> MutableView[T]:
        """
        Returns a view that can be used to modify the stored value without tripping change detection.

        :returns: A mutable view of the stored value
        """
        self._check_not_extracted()
        return MutableView(self)

    def __eq__(self, other: object) -> bool:
        """
        Compares the stored value against another value. The dirty flag is not part of the comparison.

        The result of the stored value's own `__eq__` is returned as-is, so element-wise comparisons keep working.

        :param other: Plain value or other tracker to compare against
        :returns: Result of comparing the stored value against the other value
        """
        if isinstance(other, ChangeTracker):
            return self.read() == other.read()
        return self.read() == other

    def __ne__(self, other: object) -> bool:
        """
        Inverse of `__eq__`, delegated to the stored value's own `__ne__`.

        :param other: Plain value or other tracker to compare against
        :returns: Result of comparing the stored value against the other value
        """
        if isinstance(other, ChangeTracker):
            return self.read() != other.read()
        return self.read() != other

    def __str__(self) -> str:
        """
        :returns: String representation of the stored value
        """
        return str(self.read())

    def __repr__(self) -> str:
        """
        :returns: Debug string representation of the tracker. Safe to call after extraction.
        """
        if self._extracted:
            return "ChangeTracker(<extracted>)"
        return f"ChangeTracker(value={self._value!r}, dirty={self._dirty})"
