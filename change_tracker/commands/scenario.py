"""
:Description: CLI that walks a `ChangeTracker` through known access scenarios and reports every state transition.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Final, NamedTuple

import click

from change_tracker.change_tracker import ChangeTracker
from change_tracker.commands.utils.print import print_err, print_tracker_step
from change_tracker.commands.utils.types import ExitCode
from change_tracker.enums import TrackerState

log = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])

# Action performed against a tracker during a scenario
_Action = Callable[[ChangeTracker[int]], None]


class _Step(NamedTuple):
    """
    A single scenario step and the tracker contents expected once it has been performed.
    """

    description: str
    action: _Action
    expected_value: int
    expected_state: TrackerState


class _Scenario(NamedTuple):
    """
    A tracker factory and the series of steps to perform against the tracker it builds.
    """

    description: str
    factory: Callable[[], ChangeTracker[int]]
    expected_value: int
    expected_state: TrackerState
    steps: list[_Step]


def _add_through_write(amount: int) -> _Action:
    """
    :param amount: Amount to add to the tracked value
    :returns: An action that adds to the tracked value through `write()`
    """

    def _action(tracker: ChangeTracker[int]) -> None:
        view = tracker.write()
        view.value += amount

    return _action


def _add_silently(amount: int) -> _Action:
    """
    :param amount: Amount to add to the tracked value
    :returns: An action that adds to the tracked value through `mutate_silently()`
    """

    def _action(tracker: ChangeTracker[int]) -> None:
        view = tracker.mutate_silently()
        view.value += amount

    return _action


def _reset(tracker: ChangeTracker[int]) -> None:
    """
    :param tracker: Tracker to mark as clean
    """
    tracker.reset()


# Special scenario name that expands to every other scenario
_ALL_SCENARIOS: Final[str] = "all"

SCENARIOS: Final[dict[str, _Scenario]] = {
    "write": _Scenario(
        "create(15)",
        lambda: ChangeTracker.create(15),
        15,
        TrackerState.CLEAN,
        [_Step("write() += 5", _add_through_write(5), 20, TrackerState.DIRTY)],
    ),
    "reset": _Scenario(
        "create(15)",
        lambda: ChangeTracker.create(15),
        15,
        TrackerState.CLEAN,
        [
            _Step("write() += 5", _add_through_write(5), 20, TrackerState.DIRTY),
            _Step("reset()", _reset, 20, TrackerState.CLEAN),
        ],
    ),
    "silent": _Scenario(
        "create(5)",
        lambda: ChangeTracker.create(5),
        5,
        TrackerState.CLEAN,
        [_Step("mutate_silently() += 5", _add_silently(5), 10, TrackerState.CLEAN)],
    ),
    "dirty": _Scenario(
        "create_dirty(5)",
        lambda: ChangeTracker.create_dirty(5),
        5,
        TrackerState.DIRTY,
        [],
    ),
}


def _check_tracker(
    name: str,
    step: str,
    tracker: ChangeTracker[int],
    expected_value: int,
    expected_state: TrackerState,
    print_enabled: bool,
) -> bool:
    """
    Reports the state of the tracker and compares it against expectations.

    :param name: Name of the scenario being run
    :param step: Description of the step that was just performed
    :param tracker: Tracker under test
    :param expected_value: Value the tracker should hold
    :param expected_state: State the tracker should be in
    :param print_enabled: Flag to enable printing the state of the tracker
    :returns: True if the tracker meets expectations. False otherwise.
    """
    print_tracker_step(name, step, tracker, print_enabled=print_enabled)
    if tracker != expected_value:
        log.error("`%s` after `%s`: expected value %d, got %r", name, step, expected_value, tracker.read())
        return False
    if tracker.state() != expected_state:
        log.error("`%s` after `%s`: expected state %s, got %s", name, step, expected_state, tracker.state())
        return False
    return True


def run_scenario(name: str, print_enabled: bool = True) -> bool:
    """
    Runs a single scenario, stopping at the first step that does not meet expectations.

    :param name: Name of the scenario to run
    :param print_enabled: (Optional) Flag to enable printing every step to STDOUT. Enabled by default.
    :returns: True if every step met expectations. False otherwise.
    """
    cur: Final[_Scenario] = SCENARIOS[name]
    log.debug("Running scenario `%s` with %d step(s)", name, len(cur.steps))
    tracker = cur.factory()
    if not _check_tracker(name, cur.description, tracker, cur.expected_value, cur.expected_state, print_enabled):
        return False
    for step in cur.steps:
        step.action(tracker)
        if not _check_tracker(
            name, step.description, tracker, step.expected_value, step.expected_state, print_enabled
        ):
            return False
    return True


def _expand_scenario_names(names: tuple[str, ...]) -> list[str]:
    """
    Expands the special `all` name and drops duplicates, preserving the order given on the command line.

    :param names: Scenario names provided by the user
    :returns: Ordered list of unique scenario names
    """
    expanded: list[str] = []
    for name in names:
        for cur in (SCENARIOS if name == _ALL_SCENARIOS else [name]):
            if cur not in expanded:
                expanded.append(cur)
    return expanded


@click.command(short_help="Walks change trackers through access scenarios.")
@click.argument(
    "scenario_names",
    nargs=-1,
    required=True,
    type=click.Choice(list(SCENARIOS) + [_ALL_SCENARIOS]),
)
@click.option(
    "--fail-fast",
    "-x",
    is_flag=True,
    default=False,
    help="Stop at the first scenario that does not meet expectations.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Only report failures, without printing every step.",
)
def scenario(scenario_names: tuple[str, ...], fail_fast: bool, quiet: bool) -> None:
    """
    Runs change tracking scenarios, printing the tracked value and state after every step.

    SCENARIO_NAMES: One or more scenarios to run. `all` runs every scenario.
    """
    names: Final[list[str]] = _expand_scenario_names(scenario_names)
    failed: list[str] = []
    for name in names:
        if run_scenario(name, print_enabled=not quiet):
            continue
        failed.append(name)
        if fail_fast:
            break

    if failed:
        print_err(f"{len(failed)} of {len(names)} scenario(s) failed: {', '.join(failed)}")
        sys.exit(ExitCode.SCENARIO_FAILED)
    log.info("All %d scenario(s) passed.", len(names))
    sys.exit(ExitCode.SUCCESS)
