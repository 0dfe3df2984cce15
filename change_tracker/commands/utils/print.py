"""
:Description: Provides print utility functions
"""

from __future__ import annotations

import sys

from change_tracker.change_tracker import ChangeTracker
from change_tracker.types import T


def print_out(*args, print_enabled: bool = True, **kwargs) -> None:  # type: ignore
    """
    Convenience wrapper that prints to STDOUT

    :param print_enabled: (Optional) Flag to enable printing. Enabled by default.
    """
    if print_enabled:
        print(*args, file=sys.stdout, **kwargs)  # type: ignore


def print_err(*args, **kwargs) -> None:  # type: ignore
    """
    Convenience wrapper that prints to STDERR. Errors are always reported.
    """
    print(*args, file=sys.stderr, **kwargs)  # type: ignore


def print_tracker_step(scenario: str, step: str, tracker: ChangeTracker[T], print_enabled: bool = True) -> None:
    """
    Prints the state of a tracker after a scenario step has been performed, in the form:
        `<scenario>: <step> -> value=<value> state=<state>`

    :param scenario: Name of the scenario being run
    :param step: Description of the step that was just performed
    :param tracker: Tracker to report on. Reading it does not trip change detection.
    :param print_enabled: (Optional) Flag to enable printing. Enabled by default.
    """
    print_out(f"{scenario}: {step} -> value={tracker.read()!r} state={tracker.state()}", print_enabled=print_enabled)
