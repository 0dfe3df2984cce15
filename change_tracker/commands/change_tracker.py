"""
:Description: Base CLI for all `change-tracker` commands
"""

from __future__ import annotations

import logging

import click

from change_tracker.commands.scenario import scenario


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    show_default=True,
    help="Enables verbose logging (for commands that use the logger).",
)
@click.version_option()
def change_tracker(verbose: bool) -> None:
    """
    Command line interface for exercising `ChangeTracker` instances.

    A change tracker wraps a single value and reports whether it has been accessed for mutation since it was created
    or last reset. Sub-commands walk trackers through their access paths and report every state transition.
    """
    # Initialize the logger, available to all commands.
    logging.basicConfig(
        format="%(asctime)s[%(levelname)s][%(name)s]: %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


change_tracker.add_command(scenario)


if __name__ == "__main__":
    change_tracker(False)
